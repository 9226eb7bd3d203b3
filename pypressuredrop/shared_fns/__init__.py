from .shared_fns import convert_to_numpy, frozen, same_lengths
