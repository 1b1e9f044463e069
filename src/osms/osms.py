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
from dataclasses import dataclass

@dataclass(frozen=True)
class _CN:
    DBG  = oslg.CN.DEBUG
    INF  = oslg.CN.INFO
    WRN  = oslg.CN.WARN
    ERR  = oslg.CN.ERROR
    FTL  = oslg.CN.FATAL
    NS   = 10          # number of spaces to generate (see 'genSpaces')
    SI   = "m^2"       # native OpenStudio area units
    IP   = "ft^2"      # reported area units
CN = _CN()

# OpenStudio sub surface types targeted by window-swapping measures, keyed by
# the measure flag enabling each of them.
_wins = dict(
       fixed = "fixedwindow",
    operable = "operablewindow"
    )

# Objects that may hold (i.e. be a source of) a default construction set,
# in order of increasing precedence (see 'swapDefaultConstructionSet').
_srcs = ("Building", "BuildingStory", "SpaceType", "Space")


def wins() -> dict:
    """Returns window sub surface types, keyed by measure flag."""
    return _wins


def srcs() -> tuple:
    """Returns supported default construction set source types."""
    return _srcs


def genSpaces(model=None, n=CN.NS) -> list:
    """Adds new (empty) spaces to a model.

    Args:
        model (openstudio.model.Model):
            An OpenStudio model.
        n (int):
            Number of spaces to add.

    Returns:
        list of openstudio.model.Space: New spaces, in order of creation.
        []: If invalid inputs (see logs).

    """
    mth = "osms.genSpaces"
    cl  = openstudio.model.Model

    if not isinstance(model, cl):
        return oslg.mismatch("model", model, cl, mth, CN.DBG, [])

    try:
        n = int(n)
    except (ValueError, TypeError):
        return oslg.mismatch("n", n, int, mth, CN.DBG, [])

    if n < 0:
        return oslg.invalid("n", mth, 2, CN.DBG, [])

    return [openstudio.model.Space(model) for _ in range(n)]


def fenestrationConstructions(model=None) -> dict:
    """Returns a model's fenestration constructions, sorted by name.

    Args:
        model (openstudio.model.Model):
            An OpenStudio model.

    Returns:
        dict: Fenestration constructions (values), keyed by name.
        dict: Empty if invalid input (see logs).

    """
    mth = "osms.fenestrationConstructions"
    cl  = openstudio.model.Model

    if not isinstance(model, cl):
        return oslg.mismatch("model", model, cl, mth, CN.DBG, dict())

    cons = {c.nameString(): c for c in model.getConstructions()}

    return {k: cons[k] for k in sorted(cons) if cons[k].isFenestration()}


def isOutdoorWindow(s=None, fixed=True, operable=True) -> bool:
    """Validates whether a sub surface is a targeted, outdoor-facing window.

    Args:
        s (openstudio.model.SubSurface):
            An OpenStudio sub surface.
        fixed (bool):
            Whether "FixedWindow" sub surfaces are targeted.
        operable (bool):
            Whether "OperableWindow" sub surfaces are targeted.

    Returns:
        bool: Whether sub surface is a targeted outdoor window.
        False: If invalid inputs (see logs).

    """
    mth = "osms.isOutdoorWindow"
    cl  = openstudio.model.SubSurface

    if not isinstance(s, cl):
        return oslg.mismatch("subsurface", s, cl, mth, CN.DBG, False)
    if not isinstance(fixed, bool):
        return oslg.mismatch("fixed", fixed, bool, mth, CN.DBG, False)
    if not isinstance(operable, bool):
        return oslg.mismatch("operable", operable, bool, mth, CN.DBG, False)

    if s.outsideBoundaryCondition().lower() != "outdoors": return False

    type = s.subSurfaceType().lower()

    if fixed    and type == _wins["fixed"   ]: return True
    if operable and type == _wins["operable"]: return True

    return False


def windows(model=None, fixed=True, operable=True) -> list:
    """Returns targeted outdoor windows (see 'isOutdoorWindow').

    Args:
        model (openstudio.model.Model):
            An OpenStudio model.
        fixed (bool):
            Whether "FixedWindow" sub surfaces are targeted.
        operable (bool):
            Whether "OperableWindow" sub surfaces are targeted.

    Returns:
        list of openstudio.model.SubSurface: Targeted windows.
        []: If invalid inputs (see logs).

    """
    mth = "osms.windows"
    cl  = openstudio.model.Model

    if not isinstance(model, cl):
        return oslg.mismatch("model", model, cl, mth, CN.DBG, [])
    if not isinstance(fixed, bool):
        return oslg.mismatch("fixed", fixed, bool, mth, CN.DBG, [])
    if not isinstance(operable, bool):
        return oslg.mismatch("operable", operable, bool, mth, CN.DBG, [])

    subs = model.getSubSurfaces()

    return [s for s in subs if isOutdoorWindow(s, fixed, operable)]


def constructionNames(subs=[]) -> list:
    """Returns sorted, unique construction names of sub surfaces.

    Both hard-assigned and defaulted constructions are considered. Sub
    surfaces without a construction are ignored.

    Args:
        subs (list):
            OpenStudio sub surfaces.

    Returns:
        list of str: Construction names.
        []: If invalid input (see logs).

    """
    mth = "osms.constructionNames"
    cl  = openstudio.model.SubSurface
    ids = set()

    try:
        subs = list(subs)
    except TypeError:
        return oslg.mismatch("subsurfaces", subs, list, mth, CN.DBG, [])

    for s in subs:
        if not isinstance(s, cl):
            return oslg.mismatch("subsurface", s, cl, mth, CN.DBG, [])

        if s.construction(): ids.add(s.construction().get().nameString())

    return sorted(ids)


def cloneConstruction(model=None, c=None):
    """Clones a construction, e.g. to isolate its net area for reporting.

    Args:
        model (openstudio.model.Model):
            The OpenStudio model holding the clone.
        c (openstudio.model.Construction):
            A construction to clone.

    Returns:
        openstudio.model.Construction: A cloned construction.
        None: If invalid inputs (see logs).

    """
    mth = "osms.cloneConstruction"
    cl1 = openstudio.model.Model
    cl2 = openstudio.model.Construction

    if not isinstance(model, cl1):
        return oslg.mismatch("model", model, cl1, mth)
    if not isinstance(c, cl2):
        return oslg.mismatch("construction", c, cl2, mth)

    clone = c.clone(model).to_Construction()

    if not clone:
        oslg.log(CN.ERR, "Unable to clone '%s' (%s)" % (c.nameString(), mth))
        return None

    return clone.get()


def cloneDefaultConstructionSet(cset=None, c=None, fixed=True, operable=True):
    """Clones a default construction set, holding a new window construction.

    The set's exterior sub surface constructions are cloned as well, and
    then reset with the new construction for fixed and/or operable windows.
    The original set (and its sub surface constructions) remain unchanged.

    Args:
        cset (openstudio.model.DefaultConstructionSet):
            A default construction set.
        c (openstudio.model.ConstructionBase):
            New window construction.
        fixed (bool):
            Whether to reset the "FixedWindow" construction.
        operable (bool):
            Whether to reset the "OperableWindow" construction.

    Returns:
        openstudio.model.DefaultConstructionSet: A new construction set.
        None: If invalid inputs, or if no exterior sub surface constructions.

    """
    mth = "osms.cloneDefaultConstructionSet"
    cl1 = openstudio.model.DefaultConstructionSet
    cl2 = openstudio.model.ConstructionBase

    if not isinstance(cset, cl1):
        return oslg.mismatch("set", cset, cl1, mth)
    if not isinstance(c, cl2):
        return oslg.mismatch("construction", c, cl2, mth)
    if not isinstance(fixed, bool):
        return oslg.mismatch("fixed", fixed, bool, mth)
    if not isinstance(operable, bool):
        return oslg.mismatch("operable", operable, bool, mth)

    if not cset.defaultExteriorSubSurfaceConstructions(): return None

    model = cset.model()
    subs  = cset.defaultExteriorSubSurfaceConstructions().get()
    nset  = cset.clone(model).to_DefaultConstructionSet().get()
    nsubs = subs.clone(model).to_DefaultSubSurfaceConstructions().get()

    if fixed:    nsubs.setFixedWindowConstruction(c)
    if operable: nsubs.setOperableWindowConstruction(c)

    nset.setDefaultExteriorSubSurfaceConstructions(nsubs)

    return nset


def swapDefaultConstructionSet(old=None, new=None) -> int:
    """Re-points all sources of a default construction set to another set.

    Sources are buildings, building stories, space types and spaces. Any
    other source is left untouched (logged as a warning).

    Args:
        old (openstudio.model.DefaultConstructionSet):
            Default construction set to replace.
        new (openstudio.model.DefaultConstructionSet):
            Replacement default construction set.

    Returns:
        int: Number of re-pointed sources.
        0: If invalid inputs (see logs).

    """
    mth = "osms.swapDefaultConstructionSet"
    cl  = openstudio.model.DefaultConstructionSet
    n   = 0

    if not isinstance(old, cl):
        return oslg.mismatch("old set", old, cl, mth, CN.DBG, 0)
    if not isinstance(new, cl):
        return oslg.mismatch("new set", new, cl, mth, CN.DBG, 0)
    if old == new:
        return oslg.invalid("new set", mth, 2, CN.DBG, 0)

    for src in old.sources():
        obj = None

        for type in _srcs:
            cast = getattr(src, "to_%s" % type)()

            if cast:
                obj = cast.get()
                break

        if obj is None:
            oslg.log(CN.WRN, "Skipping '%s' source (%s)" % (src.nameString(), mth))
            continue

        if obj.setDefaultConstructionSet(new):
            n += 1
            oslg.log(CN.INF, "'%s': '%s' set swapped for '%s'" % (obj.nameString(), old.nameString(), new.nameString()))

    return n


def netAreaIP(c=None) -> float:
    """Returns a construction's net area (ft2), re: OpenStudio's m2.

    Args:
        c (openstudio.model.ConstructionBase):
            A construction.

    Returns:
        float: Net area (ft2) of surfaces referencing the construction.
        0.0: If invalid input (see logs).

    """
    mth = "osms.netAreaIP"
    cl  = openstudio.model.ConstructionBase

    if not isinstance(c, cl):
        return oslg.mismatch("construction", c, cl, mth, CN.DBG, 0.0)

    area = openstudio.convert(c.getNetArea(), CN.SI, CN.IP)

    if not area:
        oslg.log(CN.ERR, "Unable to convert %s to %s (%s)" % (CN.SI, CN.IP, mth))
        return 0.0

    return area.get()


def neat(value=0, digits=0) -> str:
    """Returns a (reporting) string of a numerical value, e.g. "1,077".

    Args:
        value (float):
            A float-convertible value.
        digits (int):
            Number of significant decimals.

    Returns:
        str: Formatted string, with thousands separators.
        "": If invalid inputs (see logs).

    """
    mth = "osms.neat"

    try:
        value = float(value)
    except (ValueError, TypeError):
        return oslg.mismatch("value", value, float, mth, CN.DBG, "")

    try:
        digits = int(digits)
    except (ValueError, TypeError):
        return oslg.mismatch("digits", digits, int, mth, CN.DBG, "")

    if digits < 0: digits = 0

    return openstudio.toNeatString(value, digits, True)


def relay(runner=None) -> int:
    """Forwards logged entries to an OpenStudio measure runner.

    DEBUG and INFO entries are registered as info, WARNING and ERROR
    entries as warnings and FATAL entries as errors (i.e. measure failure).

    Args:
        runner (openstudio.measure.OSRunner):
            An OpenStudio measure runner.

    Returns:
        int: Current log status.

    """
    mth = "osms.relay"
    cl  = openstudio.measure.OSRunner

    if not isinstance(runner, cl):
        return oslg.mismatch("runner", runner, cl, mth, CN.DBG, oslg.status())

    for l in oslg.logs():
        if l["level"] == CN.FTL:
            runner.registerError(l["message"])
        elif l["level"] >= CN.WRN:
            runner.registerWarning(l["message"])
        else:
            runner.registerInfo(l["message"])

    return oslg.status()
