from .temperature import linear_wellboretemp, shiu_wellboretemp, shiu_relaxation_distance, temperature_profile, SHIU_COEFFS
