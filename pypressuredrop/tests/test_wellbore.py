#!/usr/bin/env python3
"""
Tests for pypressuredrop wellbore module (surveys, valve strings and valve mesh insertion).
Run with: python3 -m pytest pypressuredrop/tests/ -v
"""

import sys
import os
import logging

import numpy as np

# Ensure project parent is on path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(project_root))

from pypressuredrop.wellbore import Wellbore, GasliftValves, augment_with_valves, interpolate_at
from pypressuredrop.errors import WellboreError, DimensionMismatchError


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


# ============================================================================
#  Wellbore construction
# ============================================================================

def test_reference_point_prepended():
    """A survey starting below surface gains a point at md = tvd = 0."""
    md = [100.0, 1000.0, 2000.0]
    tvd = [100.0, 995.0, 1980.0]
    well = Wellbore(md, [1.0, 5.0, 10.0], tvd, [2.441, 2.441, 2.441])
    assert len(well) == 4, f"Expected 4 points, got {len(well)}"
    assert well.md[0] == 0 and well.tvd[0] == 0
    assert well.inc[0] == 0
    assert well.id[0] == 2.441
    assert np.allclose(well.md[1:], md)


def test_no_reference_point_when_at_surface():
    """A survey already starting at the origin is left at its input length."""
    well = Wellbore([0, 1000, 2000], [0, 0, 0], [0, 1000, 2000], [2.441] * 3)
    assert len(well) == 3, f"Expected 3 points, got {len(well)}"


def test_uniform_id_broadcasts():
    well = Wellbore([0, 1000, 2000], [0, 0, 0], [0, 1000, 2000], 2.992)
    assert len(well.id) == 3
    assert np.all(well.id == 2.992)


def test_mismatched_lengths_raise():
    """Every combination of one short array raises a dimension mismatch."""
    base = {'md': [0, 1000, 2000], 'inc': [0, 0, 0], 'tvd': [0, 1000, 2000], 'id': [2.441, 2.441, 2.441]}
    for name in base:
        args = dict(base)
        args[name] = args[name][:2]
        try:
            Wellbore(args['md'], args['inc'], args['tvd'], args['id'])
            assert False, f"Short {name} should have raised DimensionMismatchError"
        except DimensionMismatchError:
            pass

    # A one element id list is not a uniform diameter
    try:
        Wellbore(base['md'], base['inc'], base['tvd'], [2.441])
        assert False, "A length-1 id list against three survey points should have raised DimensionMismatchError"
    except DimensionMismatchError:
        pass


def test_negative_depths():
    """Negative depths are rejected unless allow_negatives is set, in which case inputs are unchanged."""
    md, inc, tvd, ids = [-50, 0, 1000], [0, 0, 0], [-50, 0, 1000], [2.441] * 3
    try:
        Wellbore(md, inc, tvd, ids)
        assert False, "Should have raised WellboreError"
    except WellboreError:
        pass
    try:
        Wellbore([0, 1000], [0, 0], [0, -10], [2.441, 2.441])
        assert False, "Negative tvd should have raised WellboreError"
    except ValueError:
        pass

    well = Wellbore(md, inc, tvd, ids, allow_negatives=True)
    assert len(well) == 3
    assert np.allclose(well.md, md)
    assert np.allclose(well.tvd, tvd)


def test_decreasing_md_rejected():
    try:
        Wellbore([0, 2000, 1000], [0, 0, 0], [0, 2000, 1000], 2.441)
        assert False, "Should have raised WellboreError"
    except WellboreError:
        pass


def test_wellbore_is_read_only():
    well = Wellbore([0, 1000], [0, 0], [0, 1000], 2.441)
    try:
        well.md[1] = 500
        assert False, "Survey arrays should be read-only"
    except ValueError:
        pass


def test_wellbore_repr_and_extent():
    well = Wellbore([0, 1000, 3000], [0, 20, 40], [0, 980, 2600], [2.441, 2.441, 2.992])
    text = repr(well)
    assert text.startswith("Wellbore with 3 points.")
    assert "Max inclination 40.0" in text
    assert well.max_md == 3000
    assert well.max_tvd == 2600


# ============================================================================
#  Gas lift valves
# ============================================================================

def test_valves_basic():
    valves = GasliftValves([1500, 3000, 4500], [1000, 950, 0], [0.1, 0.1, 0], [16, 16.0, '12'])
    assert len(valves) == 3
    assert valves.port.dtype.kind == 'i'
    assert list(valves.port) == [16, 16, 12]
    assert list(valves.is_orifice) == [False, False, True]
    assert repr(valves) == "Valve design with 3 valves and bottom valve at 4500.0' MD."


def test_valves_port_coercion_failure():
    for bad in ([16.5], ['quarter']):
        try:
            GasliftValves([1500], [1000], [0.1], bad)
            assert False, f"Port {bad} should have raised WellboreError"
        except WellboreError as e:
            assert "64ths" in str(e)


def test_valves_mismatched_lengths():
    try:
        GasliftValves([1500, 3000], [1000], [0.1, 0.1], [16, 16])
        assert False, "Should have raised DimensionMismatchError"
    except DimensionMismatchError:
        pass


def test_valves_r_out_of_range():
    for r in (-0.1, 1.2):
        try:
            GasliftValves([1500], [1000], [r], [16])
            assert False, f"R = {r} should have raised WellboreError"
        except WellboreError:
            pass


def test_valves_large_r_is_advisory():
    """R above 0.2 is accepted with a logged warning."""
    handler = _ListHandler()
    logger = logging.getLogger('pypressuredrop.wellbore.wellbore')
    logger.addHandler(handler)
    try:
        valves = GasliftValves([1500], [1000], [0.5], [16])
    finally:
        logger.removeHandler(handler)
    assert valves.R[0] == 0.5
    warnings = [r for r in handler.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1, f"Expected one warning, got {len(warnings)}"
    assert "R-value" in warnings[0].getMessage()


# ============================================================================
#  Valve mesh insertion
# ============================================================================

def _survey():
    return Wellbore([0, 1000, 2000], [0, 10, 20], [0, 990, 1970], [2.441, 2.441, 2.992])


def test_valve_inserted_with_interpolation():
    """A valve between survey points adds a linearly interpolated point."""
    well = _survey()
    valves = GasliftValves([1500], [1000], [0.1], [16])
    augmented = augment_with_valves(well, valves)
    assert len(augmented) == 4
    assert augmented.md[2] == 1500
    assert abs(augmented.inc[2] - 15.0) < 1e-12
    assert abs(augmented.tvd[2] - 1480.0) < 1e-12
    assert abs(augmented.id[2] - (2.441 + 2.992) / 2) < 1e-12
    assert np.all(np.diff(augmented.md) > 0)


def test_valve_insertion_is_pure():
    """The input wellbore is not modified."""
    well = _survey()
    augment_with_valves(well, GasliftValves([500, 1500], [1000, 900], [0.1, 0.1], [16, 16]))
    assert len(well) == 3
    assert np.allclose(well.md, [0, 1000, 2000])


def test_valve_at_existing_or_beyond_depth():
    """Valves at a survey depth, or at/below the last point, add nothing."""
    well = _survey()
    augmented = augment_with_valves(well, GasliftValves([1000, 2000, 2500], [900, 900, 900], [0.1, 0.1, 0.1], [16, 16, 16]))
    assert len(augmented) == 3
    assert np.allclose(augmented.md, well.md)


def test_empty_valves_round_trip():
    well = _survey()
    augmented = augment_with_valves(well, GasliftValves([], [], [], []))
    for name in ('md', 'inc', 'tvd', 'id'):
        assert np.array_equal(getattr(augmented, name), getattr(well, name)), f"{name} changed"


def test_with_valves_constructor():
    valves = GasliftValves([500, 1500], [1000, 900], [0.1, 0.1], [16, 16])
    well = Wellbore.with_valves([1000, 2000], [10, 20], [990, 1970], 2.441, valves)
    assert len(well) == 5  # origin + 2 survey + 2 valves
    assert list(well.md) == [0, 500, 1000, 1500, 2000]
    plain = Wellbore.with_valves([1000, 2000], [10, 20], [990, 1970], 2.441)
    assert len(plain) == 3


def test_interpolate_at():
    md = [0, 1000, 2000]
    values = [100, 200, 400]
    assert interpolate_at(md, values, 500) == 150
    assert np.allclose(interpolate_at(md, values, [1000, 1500]), [200, 300])
