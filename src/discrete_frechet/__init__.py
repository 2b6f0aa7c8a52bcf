"""
discrete-frechet: Discrete Fréchet Distance between point sequences

This package parses delimited time series into curves and computes the
discrete Fréchet distance between them, a similarity measure for
polygonal curves that is robust to differences in sampling rate.
"""

from .model import Curve, Point
from .errors import (
    FrechetInputError,
    MalformedInputError,
    UnparsableCoordinateError,
    DimensionMismatchError,
    EmptySequenceError,
)
from .loader import (
    parse_coordinate,
    parse_point,
    parse_sequence,
    read_sequences,
)
from .metric import euclidean_distance, pairwise_distances
from .curve_frechet import (
    UNSET,
    FrechetResult,
    compute_frechet,
    curve_to_array,
    discrete_frechet_distance,
    format_memo_table,
)

__version__ = "0.1.0"

__all__ = [
    # Data models
    "Curve",
    "Point",
    # Errors
    "FrechetInputError",
    "MalformedInputError",
    "UnparsableCoordinateError",
    "DimensionMismatchError",
    "EmptySequenceError",
    # Parsing
    "parse_coordinate",
    "parse_point",
    "parse_sequence",
    "read_sequences",
    # Metric
    "euclidean_distance",
    "pairwise_distances",
    # Curve-based FD
    "UNSET",
    "FrechetResult",
    "compute_frechet",
    "curve_to_array",
    "discrete_frechet_distance",
    "format_memo_table",
]
