#!/usr/bin/env python3
"""
Tests for pypressuredrop traverse module (segment iteration and pressure marching).
"""

import sys
import os

import numpy as np

# Ensure project parent is on path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(project_root))

from pypressuredrop.wellbore import Wellbore
from pypressuredrop.temperature import linear_wellboretemp
from pypressuredrop.correlations import CorrelationSet, PressureGradientCorrelation
from pypressuredrop.traverse import segment_conditions, calculate_pressure_segment, traverse, casing_traverse
from pypressuredrop.errors import ConvergenceError, DimensionMismatchError

FLUID = dict(api=35, sg_water=1.0, sg_gas=0.75)


def _vertical_well(depth=8000, step=500):
    md = np.arange(0, depth + 1, step)
    return Wellbore(md, np.zeros(len(md)), md, 2.441)


# ============================================================================
#  Segment conditions
# ============================================================================

def test_segment_conditions_undersaturated():
    """Above the bubble point all gas is in solution."""
    flow = segment_conditions(3000, 150, 100, 100, 0, 2.441, 0.0, q_o=500, q_w=0, glr=200, **FLUID)
    assert flow.v_sg == 0.0
    assert flow.v_sl > 0
    assert 40 < flow.rho_l < 55, f"Oil density {flow.rho_l}"


def test_segment_conditions_free_gas():
    flow = segment_conditions(300, 120, 100, 100, 0, 2.441, 0.0, q_o=500, q_w=500, glr=1000, **FLUID)
    assert flow.v_sg > 0
    assert flow.rho_g < flow.rho_l
    assert flow.mu_g < flow.mu_l
    assert flow.sigma_l > 0


def test_segment_conditions_pressure_floor():
    flow = segment_conditions(-50, 120, 100, 100, 0, 2.441, 0.0, q_o=100, q_w=0, glr=100, **FLUID)
    assert flow.p_avg == 14.696


# ============================================================================
#  Segment iteration
# ============================================================================

def test_two_point_well_converges():
    """0 / 5000 ft vertical, 2.441 in, smooth pipe, low GLR: converges quickly with a positive increase."""
    well = Wellbore([0, 5000], [0, 0], [0, 5000], 2.441)
    assert len(well) == 2
    temps = linear_wellboretemp(well, 100, 180)
    dp, iterations = calculate_pressure_segment(
        214.696, (temps[0] + temps[1]) / 2, 100.0, 0.0, 5000.0, 5000.0, 0.0, 2.441, 0.0,
        q_o=100, q_w=100, glr=100, error_tolerance=0.1, **FLUID)
    assert 1500 < dp < 2500, f"Segment dp {dp}"
    assert iterations <= 10, f"Took {iterations} iterations"

    pressures = traverse(well, temps, 214.696, 100, 100, 100, roughness=0.0, dp_est=100, **FLUID)
    assert abs(pressures[1] - pressures[0] - dp) < 1e-9


def test_zero_length_segment():
    dp, iterations = calculate_pressure_segment(1000, 150, 50.0, 2000.0, 2000.0, 0.0, 0.0, 2.441, 0.0,
                                                q_o=100, q_w=100, glr=100, **FLUID)
    assert dp == 0.0 and iterations == 0


def test_convergence_failure_raises():
    well = Wellbore([0, 5000], [0, 0], [0, 5000], 2.441)
    temps = linear_wellboretemp(well, 100, 180)
    try:
        traverse(well, temps, 214.696, 100, 100, 100, dp_est=1.0, max_iterations=1, **FLUID)
        assert False, "Should have raised ConvergenceError"
    except ConvergenceError as e:
        assert e.md_top == 0 and e.md_bottom == 5000
        assert e.iterations == 1
        assert "5000" in str(e)


# ============================================================================
#  Traverses
# ============================================================================

def test_static_column_is_hydrostatic():
    """With no flow the profile is the liquid head."""
    well = Wellbore([0, 5000], [0, 0], [0, 5000], 2.441)
    temps = np.array([150.0, 150.0])
    pressures = traverse(well, temps, 114.696, 0, 0, 0, **FLUID)
    flow = segment_conditions(pressures.mean(), 150, 5000, 5000, 0, 2.441, 0.0, 0, 0, 0, **FLUID)
    expected = flow.rho_l * 5000 / 144
    assert abs((pressures[1] - pressures[0]) - expected) / expected < 1e-6


def test_pressure_monotonic_with_depth():
    well = _vertical_well()
    temps = linear_wellboretemp(well, 100, 200)
    pressures = traverse(well, temps, 164.696, 500, 500, 400, roughness=0.0006, **FLUID)
    assert np.all(np.diff(pressures) > 0), "Pressure should rise with depth"
    assert pressures[0] == 164.696


def test_hagedorn_brown_traverse():
    well = _vertical_well(5000)
    temps = linear_wellboretemp(well, 100, 180)
    pressures = traverse(well, temps, 214.696, 300, 300, 300, correlations=CorrelationSet(pressurecorrelation='HB'),
                         roughness=0.0006, **FLUID)
    assert np.all(np.diff(pressures) > 0)
    assert 1000 < pressures[-1] < 2600


def test_inlet_referenced_reverses_outlet():
    """Marching up from the bottomhole pressure recovers the wellhead pressure."""
    well = _vertical_well(6000, 1000)
    temps = linear_wellboretemp(well, 100, 180)
    down = traverse(well, temps, 214.696, 300, 300, 300, error_tolerance=0.01, **FLUID)
    up = traverse(well, temps, down[-1], 300, 300, 300, error_tolerance=0.01, outlet_referenced=False, **FLUID)
    assert up[-1] == down[-1]
    assert np.allclose(up, down, atol=1.0), f"{up} vs {down}"


def test_injection_point_uses_natural_glr_below():
    well = _vertical_well(6000)
    temps = linear_wellboretemp(well, 100, 180)
    full = traverse(well, temps, 164.696, 300, 300, 800, **FLUID)
    lifted = traverse(well, temps, 164.696, 300, 300, 800, injection_point=3000, natural_glr=100, **FLUID)
    above = well.md <= 3000
    assert np.array_equal(full[above], lifted[above])
    assert lifted[-1] > full[-1], "Less gas below the injection point gives a heavier column"

    no_natural = traverse(well, temps, 164.696, 300, 300, 800, injection_point=3000, **FLUID)
    assert np.array_equal(no_natural, full)


def test_custom_gradient_correlation():
    """A user correlation plugs into the traverse without other changes."""
    class HalfPsiPerFoot(PressureGradientCorrelation):
        def __call__(self, flow):
            return 0.5 * flow.tvd_length

    well = Wellbore([0, 1000, 2000, 2000, 3000], [0, 0, 0, 0, 0], [0, 1000, 2000, 2000, 3000], 2.441)
    temps = linear_wellboretemp(well, 100, 150)
    pressures = traverse(well, temps, 100.0, 100, 0, 100, correlations=CorrelationSet(pressurecorrelation=HalfPsiPerFoot()),
                         **FLUID)
    assert np.allclose(pressures, 100 + 0.5 * well.tvd)


def test_temperature_length_mismatch():
    well = _vertical_well(2000)
    try:
        traverse(well, [100, 150], 214.696, 100, 100, 100, **FLUID)
        assert False, "Should have raised DimensionMismatchError"
    except DimensionMismatchError:
        pass


def test_casing_gas_column():
    well = _vertical_well(6000)
    temps = 0.85 * linear_wellboretemp(well, 100, 180)
    casing = casing_traverse(well, temps, 1014.696, 0.65)
    assert casing[0] == 1014.696
    assert np.all(np.diff(casing) > 0)
    gradient = (casing[-1] - casing[0]) / 6000
    assert 0.015 < gradient < 0.04, f"Gas gradient {gradient} psi/ft"
