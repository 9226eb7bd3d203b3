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


class WellboreError(ValueError):
    """Invalid survey or valve input, rejected at construction."""


class DimensionMismatchError(WellboreError):
    """Parallel input arrays of unequal length."""


class ConvergenceError(RuntimeError):
    """ A segment pressure iteration did not settle within its iteration bound.

        md_top, md_bottom: Measured depths bounding the offending segment (ft)
        iterations: Number of iterations attempted
        last_dp: Last pressure differential estimate (psi)
        change: Change in differential on the final iteration (psi)
    """
    def __init__(self, md_top, md_bottom, iterations, last_dp, change):
        self.md_top = md_top
        self.md_bottom = md_bottom
        self.iterations = iterations
        self.last_dp = last_dp
        self.change = change
        super().__init__(
            f"Pressure iteration for segment {md_top:.1f}' - {md_bottom:.1f}' MD did not converge "
            f"after {iterations} iterations (last dp {last_dp:.3f} psi, change {change:.3f} psi). "
            "Check the correlation choice, tolerances and input rates.")
