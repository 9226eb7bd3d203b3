from .traverse import segment_conditions, calculate_pressure_segment, traverse, casing_traverse
