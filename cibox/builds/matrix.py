"""Combinatorial build matrix.

A matrix holds named dimensions, each a sequence of values, and expands them
into their cartesian product. Expansion follows odometer order: dimensions are
expanded in registration order with the first registered dimension varying
slowest and the last one fastest, and every dimension's values are visited in
the order they were supplied. The same matrix always yields the same
combinations in the same order.
"""

import itertools
import math
from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any


Combination = dict[str, Any]


class Matrix:
    """Named dimensions and their cartesian product."""

    def __init__(self) -> None:
        self._dimensions: dict[str, tuple[Any, ...]] = {}

    def set_dimension(self, name: str, values: Iterable[Any]) -> None:
        """Register or replace a dimension.

        Replacing a dimension keeps its original position in the expansion
        order. An empty sequence is allowed and empties the whole product.

        Args:
            name: Dimension name, used as the key in every combination
            values: Values of the dimension, copied on registration
        """
        self._dimensions[name] = tuple(values)

    @property
    def dimensions(self) -> Mapping[str, Sequence[Any]]:
        """Read-only view of the registered dimensions."""
        return MappingProxyType(self._dimensions)

    @property
    def size(self) -> int:
        """Number of combinations :meth:`compute` yields."""
        return math.prod(len(values) for values in self._dimensions.values())

    def __len__(self) -> int:
        return self.size

    def compute(self) -> Iterator[Combination]:
        """Lazily yield every combination of the registered dimensions.

        Each combination is a fresh dict mapping dimension name to one value.
        A matrix without dimensions yields a single empty combination.
        """
        names = tuple(self._dimensions)
        for values in itertools.product(*self._dimensions.values()):
            yield dict(zip(names, values, strict=True))
