from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Point:
    """
    A single point of a polygonal curve.

    Attributes
    ----------
    dimensions : tuple of int
        Ordered integer coordinates of the point. Must hold at least
        one value; the number of values is the point's dimensionality.
    """

    dimensions: Tuple[int, ...]

    def __post_init__(self) -> None:
        # Accept any iterable of integers (numpy ints included) but always
        # store a tuple; floats raise TypeError instead of being truncated
        coords = tuple(operator.index(v) for v in self.dimensions)
        if len(coords) == 0:
            raise ValueError("Point must have at least one coordinate")
        object.__setattr__(self, "dimensions", coords)

    @classmethod
    def of(cls, *coords: int) -> "Point":
        """Build a point from positional coordinates, e.g. ``Point.of(3, 4)``."""
        return cls(tuple(coords))

    @property
    def dim(self) -> int:
        return len(self.dimensions)

    def as_array(self) -> NDArray[np.float64]:
        return np.asarray(self.dimensions, dtype=np.float64)


# One polygonal curve, P or Q
Curve = List[Point]
