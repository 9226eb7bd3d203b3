from .wellbore import GasliftValves, Wellbore, augment_with_valves, interpolate_at
