from .dimension import get_dimension
from .num_utils import round_half_up
from .indices import normalize_indices
from .seed import make_rng, seed_to_int

__all__ = ['get_dimension', 'round_half_up', 'normalize_indices', 'make_rng', 'seed_to_int']
