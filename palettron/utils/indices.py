from typing import Iterable, FrozenSet, Union
import numbers

Indices = Union[int, Iterable[int]]

def normalize_indices(indices: Indices) -> FrozenSet[int]:
    """
    Collapse a single index or an iterable of indices into a set.

    Duplicate indices collapse; the order the caller listed them in is
    irrelevant to every operation consuming the result.
    """
    if isinstance(indices, numbers.Integral):
        return frozenset((int(indices),))
    return frozenset(int(i) for i in indices)
