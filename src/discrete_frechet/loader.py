"""
Parsers that turn delimited text lines into curves.

A line holds one curve as semicolon-separated tuples of comma-separated
integer coordinates, for example ``64,25;42,55;37,21``.
"""

from __future__ import annotations

import logging
import re
from typing import Tuple

from .errors import MalformedInputError, UnparsableCoordinateError
from .model import Curve, Point

logger = logging.getLogger(__name__)


PAIR_SEPARATOR = ";"
COORDINATE_SEPARATOR = ","

COORDINATE_MIN = -(2**31)
COORDINATE_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_coordinate(token: str, *, strict: bool = False) -> int:
    """
    Parse a single coordinate token as an integer.

    Only optionally signed ASCII digit runs within the 32-bit signed range
    are accepted; surrounding whitespace is ignored. Anything else (``"abc"``,
    ``"1_000"``, ``"1.5"``, non-ASCII digits, out-of-range values) is read as
    ``0`` unless ``strict`` is set, in which case
    ``UnparsableCoordinateError`` is raised.
    """
    stripped = token.strip()
    # More than ten significant digits is always out of range
    if _INTEGER_RE.fullmatch(stripped) and len(stripped.lstrip("+-").lstrip("0")) <= 10:
        value = int(stripped)
        if COORDINATE_MIN <= value <= COORDINATE_MAX:
            return value

    if strict:
        raise UnparsableCoordinateError(token)
    logger.warning("Unparsable coordinate %r read as 0", token)
    return 0


def parse_point(
    token: str,
    *,
    coord_sep: str = COORDINATE_SEPARATOR,
    strict: bool = False,
) -> Point:
    """Parse one tuple token such as ``"3,4"`` into a Point."""
    coords = tuple(parse_coordinate(t, strict=strict) for t in token.split(coord_sep))
    return Point(coords)


def parse_sequence(
    line: str,
    *,
    pair_sep: str = PAIR_SEPARATOR,
    coord_sep: str = COORDINATE_SEPARATOR,
    strict: bool = False,
) -> Curve:
    """
    Parse a text line into an ordered list of points.

    Parameters
    ----------
    line : str
        Raw input such as ``"64,25;42,55;37,21"``.
    pair_sep : str
        Separator between point tuples, default ``";"``.
    coord_sep : str
        Separator between the coordinates of one tuple, default ``","``.
    strict : bool
        If True, reject non-integer coordinates instead of reading them as 0.

    Returns
    -------
    Curve
        Points in input order. Blank tuples (e.g. from a trailing
        separator) are skipped, so an empty or blank line gives ``[]``.

    Notes
    -----
    Tuples are not checked for a common dimensionality here; the distance
    engine rejects mixed curves.
    """
    points: Curve = []

    for tup in line.split(pair_sep):
        if not tup.strip():
            continue
        points.append(parse_point(tup, coord_sep=coord_sep, strict=strict))

    logger.debug("Parsed %d points from %r", len(points), line)
    return points


def read_sequences(
    line_p: str,
    line_q: str,
    *,
    pair_sep: str = PAIR_SEPARATOR,
    coord_sep: str = COORDINATE_SEPARATOR,
    strict: bool = False,
) -> Tuple[Curve, Curve]:
    """
    Parse the two input lines of one request.

    Raises
    ------
    MalformedInputError
        If either line is empty or contains no point tuples.
    UnparsableCoordinateError
        If ``strict`` is set and a coordinate is not an integer.
    """
    curves = []
    for name, line in (("first", line_p), ("second", line_q)):
        if not line or not line.strip():
            raise MalformedInputError(f"The {name} time series is empty")
        curve = parse_sequence(line, pair_sep=pair_sep, coord_sep=coord_sep, strict=strict)
        if not curve:
            raise MalformedInputError(f"The {name} time series contains no points")
        curves.append(curve)

    return curves[0], curves[1]
