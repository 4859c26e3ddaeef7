"""Road-list input format — header and edge lines.

Pure functions, no filesystem access. The service layer reads the file and
hands the text over; the result is a list of validated road pairs ready for
:class:`~shopnet.domain.network.ShopNetwork`.

Format::

    num_shops num_roads
    shop_id road_to
    shop_id road_to
    ...

Fatal problems raise :class:`InputFormatError`. An out-of-range shop id
only skips its line and records a warning.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# Two unsigned ASCII decimal integers at the start of a line; trailing text ignored.
_PAIR_PATTERN = re.compile(r"^\s*\+?([0-9]+)\s+\+?([0-9]+)")

HEADER_PARSE = "HEADER_PARSE"
SHOP_COUNT_RANGE = "SHOP_COUNT_RANGE"
ROAD_COUNT_RANGE = "ROAD_COUNT_RANGE"
EDGE_PARSE = "EDGE_PARSE"


class InputFormatError(ValueError):
    """Fatal input problem. No result may be produced after one of these."""

    def __init__(self, code: str, message: str, *, line: int | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.line = line


@dataclass(frozen=True)
class InputLimits:
    """Accepted ranges, all bounds inclusive."""

    min_shops: int = 2
    max_shops: int = 1000
    min_roads: int = 1
    max_roads: int = 1000
    min_shop_id: int = 1
    max_shop_id: int = 1000
    strict_road_to: bool = False


@dataclass(frozen=True)
class ParsedInput:
    """Validated header counts, road pairs in file order, and skip warnings."""

    num_shops: int
    num_roads: int
    edges: list[tuple[int, int]] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def parse_pair(line: str) -> tuple[int, int] | None:
    """Parse the leading two unsigned integers of *line*, or None."""
    match = _PAIR_PATTERN.match(line)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def parse_header(line: str | None, limits: InputLimits) -> tuple[int, int]:
    """Parse and range-check the ``num_shops num_roads`` header."""
    pair = parse_pair(line) if line is not None else None
    if pair is None:
        raise InputFormatError(HEADER_PARSE, "couldn't parse header", line=1)

    num_shops, num_roads = pair
    if not limits.min_shops <= num_shops <= limits.max_shops:
        raise InputFormatError(
            SHOP_COUNT_RANGE,
            f"number of shops should be in between {limits.min_shops} to "
            f"{limits.max_shops} inclusive",
            line=1,
        )
    if not limits.min_roads <= num_roads <= limits.max_roads:
        raise InputFormatError(
            ROAD_COUNT_RANGE,
            f"number of roads should be in between {limits.min_roads} to "
            f"{limits.max_roads} inclusive",
            line=1,
        )
    return num_shops, num_roads


def _id_in_range(identifier: int, limits: InputLimits) -> bool:
    return limits.min_shop_id <= identifier <= limits.max_shop_id


def _range_warning(role: str, line_no: int, identifier: int, limits: InputLimits) -> str:
    return (
        f"identifier for {role} at line {line_no} is not in range "
        f"{limits.min_shop_id} to {limits.max_shop_id} inclusive: {identifier}"
    )


def parse_network(text: str, limits: InputLimits | None = None) -> ParsedInput:
    """Parse a full road list.

    Reads at most ``num_roads`` edge lines; a shorter file simply ends the
    list and anything after the declared count is ignored. Skipped lines
    still count towards ``num_roads``.

    Raises:
        InputFormatError: Unparsable header, counts out of range, or an edge
            line that does not start with two unsigned integers.
    """
    limits = limits or InputLimits()
    lines = text.splitlines()
    num_shops, num_roads = parse_header(lines[0] if lines else None, limits)

    edges: list[tuple[int, int]] = []
    warnings: list[str] = []
    for offset, raw in enumerate(lines[1 : num_roads + 1]):
        line_no = offset + 2
        pair = parse_pair(raw)
        if pair is None:
            raise InputFormatError(
                EDGE_PARSE,
                f'unexpected char stray - "{raw}"',
                line=line_no,
            )

        shop_id, road_to = pair
        if not _id_in_range(shop_id, limits):
            warnings.append(_range_warning("shop", line_no, shop_id, limits))
            continue
        if limits.strict_road_to and not _id_in_range(road_to, limits):
            warnings.append(_range_warning("road destination", line_no, road_to, limits))
            continue
        edges.append(pair)

    return ParsedInput(num_shops=num_shops, num_roads=num_roads, edges=edges, warnings=warnings)
