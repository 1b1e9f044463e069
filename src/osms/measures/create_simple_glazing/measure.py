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


class CreateSimpleGlazing(openstudio.measure.ModelMeasure):
    """Replaces outdoor window constructions with a model construction.

    Hard-assigned window constructions are replaced directly. Defaulted ones
    are replaced by swapping every default construction set in use for a
    clone holding the selected construction.
    """

    def name(self):
        return "Create_Simple_Glazing"

    def description(self):
        return "Replaces exterior fixed and/or operable window constructions with a window construction picked from the model."

    def modeler_description(self):
        return ("The selected construction is cloned, then assigned to outdoor "
                "FixedWindow and/or OperableWindow sub surfaces. Default "
                "construction sets in use are cloned with the new window "
                "construction, and swapped for the originals wherever used "
                "(building, building stories, space types, spaces).")

    def arguments(self, model=None):
        args = openstudio.measure.OSArgumentVector()
        cons = osms.fenestrationConstructions(model)
        ids  = [str(c.handle()) for c in cons.values()]

        construction = openstudio.measure.OSArgument.makeChoiceArgument("construction", ids, list(cons.keys()), True)
        construction.setDisplayName("Pick a Window Construction From the Model to Replace Existing Window Constructions.")
        args.append(construction)

        fixed = openstudio.measure.OSArgument.makeBoolArgument("change_fixed_windows", True)
        fixed.setDisplayName("Change Fixed Windows?")
        fixed.setDefaultValue(True)
        args.append(fixed)

        operable = openstudio.measure.OSArgument.makeBoolArgument("change_operable_windows", True)
        operable.setDisplayName("Change Operable Windows?")
        operable.setDefaultValue(True)
        args.append(operable)

        return args

    def construction(self, model, runner, user_arguments):
        """Returns the selected construction, or None (registering an error)."""
        obj = runner.getOptionalWorkspaceObjectChoiceValue("construction", user_arguments, model)

        if not obj:
            handle = runner.getStringArgumentValue("construction", user_arguments)

            if not handle:
                runner.registerError("No construction was chosen.")
            else:
                runner.registerError("The selected construction with handle '%s' was not found in the model. It may have been removed by another measure." % handle)

            return None

        construction = obj.get().to_Construction()

        if not construction:
            runner.registerError("Script Error - argument not showing up as construction.")
            return None

        return construction.get()

    def run(self, model, runner, user_arguments):
        super().run(model, runner, user_arguments)
        oslg.clean()

        if not runner.validateUserArguments(self.arguments(model), user_arguments):
            return False

        construction = self.construction(model, runner, user_arguments)

        if construction is None: return False

        fixed    = runner.getBoolArgumentValue("change_fixed_windows", user_arguments)
        operable = runner.getBoolArgumentValue("change_operable_windows", user_arguments)

        if not fixed and not operable:
            runner.registerAsNotApplicable("Fixed and operable windows are both set not to change.")
            return True

        subs = osms.windows(model, fixed, operable)

        if not subs:
            runner.registerAsNotApplicable("There are no appropriate exterior windows to change in the model.")
            return True

        names = osms.constructionNames(subs)
        runner.registerInitialCondition("The building had %d window constructions: %s." % (len(names), ", ".join(names)))

        # Cloned, so its net area only reflects replaced windows.
        construction = osms.cloneConstruction(model, construction)

        if construction is None:
            osms.relay(runner)
            runner.registerError("Script Error - unable to clone selected construction.")
            return False

        for cset in model.getDefaultConstructionSets():
            if cset.directUseCount() == 0: continue

            nset = osms.cloneDefaultConstructionSet(cset, construction, fixed, operable)

            if nset: osms.swapDefaultConstructionSet(cset, nset)

        for s in subs:
            if not s.isConstructionDefaulted(): s.setConstruction(construction)

        area = osms.neat(osms.netAreaIP(construction), 0)
        msg  = "%s (ft^2) of existing windows of the types: %s " % (area, ", ".join(names))
        msg += "were replaced by new %s windows." % construction.nameString()
        runner.registerFinalCondition(msg)
        osms.relay(runner)

        return True


CreateSimpleGlazing().registerWithApplication()
