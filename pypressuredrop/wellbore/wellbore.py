#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyPressureDrop - Multiphase wellbore pressure traverses and gas lift valve mechanics
              Copyright (C) 2026, pyPressureDrop contributors

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.
"""

import logging
import numbers

import numpy as np
import numpy.typing as npt

from pypressuredrop.errors import WellboreError, DimensionMismatchError
from pypressuredrop.shared_fns import convert_to_numpy, frozen, same_lengths

logger = logging.getLogger(__name__)


def _coerce_ports(port) -> np.ndarray:
    """ Coerces port sizes to integer 64ths of an inch. 16, 16.0 and '16' are all accepted """
    msg = "Specify port sizes in integer 64ths inches, e.g. 16 for a quarter-inch port."
    ports = []
    for value in np.atleast_1d(np.asarray(port, dtype=object)):
        try:
            as_float = float(value)
        except (TypeError, ValueError) as exc:
            raise WellboreError(msg) from exc
        if not np.isfinite(as_float) or as_float != int(as_float):
            raise WellboreError(msg)
        ports.append(int(as_float))
    arr = np.array(ports, dtype=int)
    arr.flags.writeable = False
    return arr


class GasliftValves:
    """ A string of gas lift valves, shallowest first.

        md: Measured depths of the valves (ft)
        ptro: Test rack opening pressures at 60 deg F (psig). Zero together with R = 0 denotes an orifice
        R: Port area / bellows area ratios, between 0 and 1
        port: Port sizes in integer 64ths of an inch
    """
    def __init__(self, md: npt.ArrayLike, ptro: npt.ArrayLike, R: npt.ArrayLike, port: npt.ArrayLike):
        md, ptro, R = frozen(md), frozen(ptro), frozen(R)
        port = _coerce_ports(port)

        if not same_lengths(md, ptro, R, port):
            raise DimensionMismatchError("Mismatched number of valve parameters used in valve constructor.")
        if np.any((R < 0) | (R > 1)):
            raise WellboreError("R-values must be between 0 and 1.")
        if np.any(R > 0.2):
            logger.warning("Large R-value(s) entered--validate valve entry data.")

        self.md = md
        self.ptro = ptro
        self.R = R
        self.port = port

    @property
    def is_orifice(self) -> np.ndarray:
        """Boolean mask of valves without a dome charge (PTRO = 0 and R = 0)."""
        return (self.ptro == 0) & (self.R == 0)

    def __len__(self):
        return len(self.md)

    def __repr__(self):
        if len(self) == 0:
            return "Valve design with 0 valves."
        return f"Valve design with {len(self)} valves and bottom valve at {self.md[-1]}' MD."


class Wellbore:
    """ Wellbore survey mesh: measured depth (ft), inclination from vertical (degrees),
        true vertical depth (ft) and inner diameter (in).

        id may be a single value, applied to every point.
        Unless allow_negatives is set, negative depths are rejected and a surface reference point
        (md = tvd = 0) is prepended when the survey does not already start there.
        Arrays are read-only once constructed.
    """
    def __init__(self, md: npt.ArrayLike, inc: npt.ArrayLike, tvd: npt.ArrayLike, id: npt.ArrayLike, allow_negatives: bool = False):
        md, inc, tvd = convert_to_numpy(md), convert_to_numpy(inc), convert_to_numpy(tvd)
        if np.ndim(id) == 0:  # only a scalar id is broadcast
            id = np.full(len(md), float(id))
        id = convert_to_numpy(id)

        if not same_lengths(md, inc, tvd, id):
            raise DimensionMismatchError("Mismatched number of wellbore elements used in wellbore constructor.")
        if len(md) == 0:
            raise WellboreError("A wellbore needs at least one survey point.")

        if not allow_negatives:
            if np.any(md < 0) or np.any(tvd < 0):
                raise WellboreError("Survey contains negative measured or true vertical depths. "
                                    "Pass the `allow_negatives` constructor flag if this is intentional.")
            if not (md[0] == tvd[0] <= 0):
                md = np.insert(md, 0, 0.0)
                inc = np.insert(inc, 0, 0.0)
                tvd = np.insert(tvd, 0, 0.0)
                id = np.insert(id, 0, id[0])

        if np.any(np.diff(md) < 0):
            raise WellboreError("Measured depths must be non-decreasing.")
        if np.any(id <= 0):
            raise WellboreError("Inner diameters must be positive.")

        self.md = frozen(md)
        self.inc = frozen(inc)
        self.tvd = frozen(tvd)
        self.id = frozen(id)

    @classmethod
    def with_valves(cls, md, inc, tvd, id, valves=None, allow_negatives=False):
        """ Builds a wellbore and inserts interpolated points at each valve depth """
        well = cls(md, inc, tvd, id, allow_negatives=allow_negatives)
        if valves is None:
            return well
        return augment_with_valves(well, valves)

    @property
    def max_md(self) -> float:
        return float(self.md[-1])

    @property
    def max_tvd(self) -> float:
        return float(np.max(self.tvd))

    def __len__(self):
        return len(self.md)

    def __repr__(self):
        return (f"Wellbore with {len(self)} points.\n"
                f"Ends at {self.md[-1]}' MD / {self.tvd[-1]}' TVD.\n"
                f"Max inclination {np.max(self.inc)}°. Average ID {round(float(np.mean(self.id)), 3)} in.")


def augment_with_valves(wellbore: Wellbore, valves: GasliftValves) -> Wellbore:
    """ Returns a new Wellbore with a mesh point at every valve depth strictly inside the survey.
        Inclination, TVD and ID of inserted points are linearly interpolated between the bracketing points.
        The input wellbore is left untouched.
    """
    md, inc = list(wellbore.md), list(wellbore.inc)
    tvd, id = list(wellbore.tvd), list(wellbore.id)

    for depth in valves.md:
        current = np.asarray(md)
        if depth in current or depth >= current[-1] or depth < current[0]:
            continue
        upper_index = int(np.searchsorted(current, depth, side="right")) - 1
        lower_index = upper_index + 1
        frac = (depth - md[upper_index]) / (md[lower_index] - md[upper_index])

        md.insert(lower_index, float(depth))
        inc.insert(lower_index, inc[upper_index] + frac * (inc[lower_index] - inc[upper_index]))
        tvd.insert(lower_index, tvd[upper_index] + frac * (tvd[lower_index] - tvd[upper_index]))
        id.insert(lower_index, id[upper_index] + frac * (id[lower_index] - id[upper_index]))

    return Wellbore(md, inc, tvd, id, allow_negatives=True)


def interpolate_at(wellbore_md: npt.ArrayLike, values: npt.ArrayLike, md: npt.ArrayLike):
    """ Linearly interpolates a profile aligned to wellbore_md at the requested measured depth(s).
        Returns a float for scalar md, otherwise a numpy array
    """
    result = np.interp(md, np.asarray(wellbore_md, dtype=float), np.asarray(values, dtype=float))
    if isinstance(md, numbers.Number):
        return float(result)
    return result
