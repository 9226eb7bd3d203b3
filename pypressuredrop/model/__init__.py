from .model import WellModel, pressure_and_temp, pressures_and_temp
