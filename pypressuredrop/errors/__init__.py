from .errors import WellboreError, DimensionMismatchError, ConvergenceError
