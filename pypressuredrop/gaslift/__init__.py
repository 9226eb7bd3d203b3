from .gaslift import (ValveState, OperatingPoint, GasliftResult, dome_pressure_at_temperature, valve_pressures,
                      find_operating_point, gaslift_model, valve_table, valve_dataframe)
