#!/usr/bin/env python3
"""
Tests for pypressuredrop io module (survey and valve file readers).
"""

import sys
import os
import tempfile

import numpy as np
import pandas as pd

# Ensure project parent is on path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.dirname(project_root))

from pypressuredrop.io import read_survey, read_valves
from pypressuredrop.errors import WellboreError


def _write(tmpdir, name, text):
    path = os.path.join(tmpdir, name)
    with open(path, 'w') as f:
        f.write(text)
    return path


def test_read_survey_csv():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, 'survey.csv', "md,inc,tvd,id\n100,0,100,2.441\n2000,5,1995,2.441\n4000,10,3980,2.992\n")
        well = read_survey(path, skiprows=1)
    assert len(well) == 4
    assert well.md[0] == 0
    assert well.id[-1] == 2.992


def test_read_survey_uniform_id():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, 'survey.txt', "0\t0\t0\n3000\t0\t3000\n")
        well = read_survey(path, id=2.441, sep='\t')
    assert len(well) == 2
    assert np.all(well.id == 2.441)


def test_read_survey_too_few_columns():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, 'survey.csv', "0,0,0\n3000,0,3000\n")
        try:
            read_survey(path)
            assert False, "Should have raised WellboreError"
        except WellboreError:
            pass


def test_read_valves_and_augmented_survey():
    with tempfile.TemporaryDirectory() as tmpdir:
        vpath = _write(tmpdir, 'valves.csv', "md,ptro,R,port\n1500,1000,0.1,16\n3000,950,0.1,16\n")
        spath = _write(tmpdir, 'survey.csv', "0,0,0,2.441\n2000,0,2000,2.441\n4000,0,4000,2.441\n")
        valves = read_valves(vpath, skiprows=1)
        well = read_survey(spath, valves=valves)
    assert len(valves) == 2
    assert list(valves.port) == [16, 16]
    assert list(well.md) == [0, 1500, 2000, 3000, 4000]


def test_read_survey_excel():
    df = pd.DataFrame([[0, 0, 0, 2.441], [2500, 0, 2500, 2.441], [5000, 0, 5000, 2.441]])
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, 'survey.xlsx')
        df.to_excel(path, header=False, index=False, engine='openpyxl')
        well = read_survey(path)
    assert len(well) == 3
    assert well.max_md == 5000


def test_read_survey_legacy_xls_rejected():
    """Legacy .xls workbooks are refused up front since openpyxl reads only the xlsx family."""
    try:
        read_survey(os.path.join(tempfile.gettempdir(), 'survey.xls'))
        assert False, "A .xls workbook should have raised WellboreError"
    except WellboreError as e:
        assert '.xlsx' in str(e)
