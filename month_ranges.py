"""
month_ranges.py — Conversion between month selections and range tokens.

The seed calendar stores each activity as a list of compact tokens:
    "Apr"      → April only
    "Mar-Jun"  → March to June inclusive
    "Nov-Feb"  → November to February, across the year boundary

decode_ranges() expands tokens into a set of month indices (0 = January),
encode_ranges() compresses a selection back into tokens. Encoding never
produces wraparound tokens: {11, 0, 1} encodes as ["Jan-Feb", "Dec"].
Decoding that output gives back the same set, so the month SET always
round-trips even though the token text may not.

Unparseable tokens are skipped without error.
"""

import re
from typing import Iterable, List, Optional, Set

from models import MonthRange


MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
          'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

# One or two three-letter abbreviations, optional hyphen between them.
TOKEN_PATTERN = re.compile(r'([A-Za-z]{3})-?([A-Za-z]{3})?')


def month_index(abbrev: str) -> Optional[int]:
    """Index of a month abbreviation (exact, case-sensitive), or None."""
    try:
        return MONTHS.index(abbrev)
    except ValueError:
        return None


def _token_months(token: str) -> List[int]:
    match = TOKEN_PATTERN.search(token)
    if not match:
        return []

    start = month_index(match.group(1))
    end = month_index(match.group(2)) if match.group(2) else start
    if start is None or end is None:
        return []

    if start > end:
        # Wraps over the year boundary
        return list(range(start, 12)) + list(range(0, end + 1))
    return list(range(start, end + 1))


def decode_ranges(tokens: Optional[Iterable[str]]) -> Set[int]:
    """
    Expand range tokens into the set of month indices they cover.

    Examples:
        >>> sorted(decode_ranges(["Nov-Feb"]))
        [0, 1, 10, 11]
        >>> decode_ranges(["Xyz", "Apr"])
        {3}
    """
    months = set()
    for token in tokens or []:
        if not isinstance(token, str):
            continue
        months.update(_token_months(token))
    return months


def month_runs(months: Iterable[int]) -> List[MonthRange]:
    """Group a month selection into ascending runs of consecutive months."""
    ordered = sorted(set(months))
    if not ordered:
        return []

    runs = []
    current = MonthRange(start=ordered[0], end=ordered[0])
    for month in ordered[1:]:
        if month == current.end + 1:
            current.end = month
        else:
            runs.append(current)
            current = MonthRange(start=month, end=month)
    runs.append(current)
    return runs


def format_range(month_range: MonthRange) -> str:
    if month_range.length == 1:
        return MONTHS[month_range.start]
    return f"{MONTHS[month_range.start]}-{MONTHS[month_range.end]}"


def encode_ranges(months: Optional[Iterable[int]]) -> List[str]:
    """
    Compress a month selection into the shortest list of range tokens.

    Examples:
        >>> encode_ranges({0, 1, 2, 5, 6, 11})
        ['Jan-Mar', 'Jun-Jul', 'Dec']
        >>> encode_ranges(set())
        []
    """
    return [format_range(r) for r in month_runs(months or [])]


def clean_tokens(tokens: Optional[Iterable[str]]) -> List[str]:
    """Drop empty and null tokens from a stored token list."""
    return [t for t in (tokens or []) if t]


def is_month_in_periods(tokens: Optional[Iterable[str]], month: int) -> bool:
    """Whether a month index is covered by any of the tokens."""
    return month in decode_ranges(tokens)
