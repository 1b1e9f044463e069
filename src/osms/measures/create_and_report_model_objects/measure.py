# BSD 3-Clause License
#
# Copyright (c) 2022-2025, rd2
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice, this
#    list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice,
#    this list of conditions and the following disclaimer in the documentation
#    and/or other materials provided with the distribution.
#
# 3. Neither the name of the copyright holder nor the names of its
#    contributors may be used to endorse or promote products derived from
#    this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.

import openstudio
from oslg import oslg
from osms import osms


class CreateAndReportModelObjects(openstudio.measure.ModelMeasure):
    """Adds spaces to a model, and reports them in returned order."""

    def name(self):
        return "create and report model objects"

    def description(self):
        return "Test measure to see if various objects and be created and returned in the same order"

    def modeler_description(self):
        return "For testing purposes only"

    def arguments(self, model=None):
        return openstudio.measure.OSArgumentVector()

    def run(self, model, runner, user_arguments):
        super().run(model, runner, user_arguments)
        oslg.clean()

        if not runner.validateUserArguments(self.arguments(model), user_arguments):
            return False

        runner.registerInitialCondition("The building started with %d spaces." % len(model.getSpaces()))

        # Echo host-assigned names, in order of creation.
        for space in osms.genSpaces(model, osms.CN.NS):
            runner.registerInfo("%s was added." % space.nameString())

        # ... then in the order the model returns them.
        for space in model.getSpaces():
            runner.registerInfo("%s is in the model." % space.nameString())

        runner.registerFinalCondition("The building finished with %d spaces." % len(model.getSpaces()))
        osms.relay(runner)

        return True


CreateAndReportModelObjects().registerWithApplication()
