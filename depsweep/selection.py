"""Parse the user's answer to the removal prompt."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# A plain decimal number, the only shape accepted without a comma.
_NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
# Leading integer of an entry; anything after it is ignored ("2.5" -> 2).
_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dataclass
class Selection:
    """0-based indices into the combined (unused + global) listing."""

    indices: list[int] = field(default_factory=list)
    select_all: bool = False


def parse_selection(answer: str, total: int) -> Selection | None:
    """Turn *answer* into a :class:`Selection`, or ``None`` if it is invalid.

    ``all`` (any case) selects everything. Otherwise the answer must contain a
    comma or be a single number (an empty answer selects nothing). Each
    comma-separated entry is read by its leading 1-based integer; entries with
    none, out of range, or repeating an earlier entry are dropped.
    """
    answer = answer.strip()
    if answer.lower() == "all":
        return Selection(indices=list(range(total)), select_all=True)

    if "," not in answer and answer and not _NUMBER.fullmatch(answer):
        return None

    indices: list[int] = []
    for token in answer.split(","):
        m = _LEADING_INT.match(token)
        if not m:
            continue
        index = int(m.group(1)) - 1
        if 0 <= index < total and index not in indices:
            indices.append(index)
    return Selection(indices=indices)
