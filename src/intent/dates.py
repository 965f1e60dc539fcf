"""Release-year parsing utilities.

Only four-digit years in the 1900-2099 window are recognized. A range such as "2015-2020",
"2015 to 2020" or "2020 til 2015" is always returned in ascending order.
"""

from __future__ import annotations

import re

_YEAR = r"(?:19|20)[0-9]{2}"

_YEAR_RE = re.compile(rf"\b{_YEAR}\b")

# Separators: ASCII hyphen, en dash, em dash, "to", "til".
_YEAR_RANGE_RE = re.compile(
    rf"\b(?P<start>{_YEAR})\s*(?:-|–|—|to|til)\s*(?P<end>{_YEAR})\b",
    flags=re.IGNORECASE,
)


def extract_year(text: str) -> int | None:
    """Return the first standalone four-digit year, or `None`."""

    match = _YEAR_RE.search(text or "")
    if not match:
        return None
    return int(match.group(0))


def extract_year_range(text: str) -> tuple[int, int] | None:
    """Return `(start, end)` with `start <= end`, or `None` if no range is present."""

    match = _YEAR_RANGE_RE.search(text or "")
    if not match:
        return None

    start, end = int(match.group("start")), int(match.group("end"))
    if start > end:
        start, end = end, start
    return start, end
