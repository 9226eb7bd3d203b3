from .io import read_survey, read_valves
