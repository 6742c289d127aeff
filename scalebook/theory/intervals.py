from __future__ import annotations

"""Interval names to semitone widths.

Names are number + quality ("3M", "5P", "7m", "4A", "5d", "9M") or quality +
number ("M3", "P5"). Perfect numbers (1, 4, 5 and their compounds) take
P/A/d, the others M/m/A/d. Repeated A or d stack ("4AA", "7dd").
"""

import re
from dataclasses import dataclass
from typing import List

# semitones of the major/perfect interval for each simple step 0..6
STEP_SEMITONES = [0, 2, 4, 5, 7, 9, 11]
PERFECTABLE_STEPS = {0, 3, 4}

_NUM_FIRST = re.compile(r"^(\d+)(P|M|m|A+|d+)$")
_QUALITY_FIRST = re.compile(r"^(P|M|m|A+|d+)(\d+)$")


@dataclass(frozen=True)
class IntervalProps:
    name: str
    number: int          # ordinal degree number, 1-based ("3M" -> 3)
    quality: str
    width: int           # semitones
    valid: bool = True

    @property
    def simple_number(self) -> int:
        return (self.number - 1) % 7 + 1


NO_INTERVAL = IntervalProps(name="", number=0, quality="", width=0, valid=False)


def _quality_offset(quality: str, perfectable: bool) -> int | None:
    if quality == "P":
        return 0 if perfectable else None
    if quality == "M":
        return None if perfectable else 0
    if quality == "m":
        return None if perfectable else -1
    if quality[0] == "A":
        return len(quality)
    # diminished: one below perfect, two below major
    return -len(quality) if perfectable else -(len(quality) + 1)


def parse_interval(name: str) -> IntervalProps:
    """Parse an interval name. Never raises; check ``valid``."""
    if not isinstance(name, str):
        return NO_INTERVAL
    src = name.strip()
    m = _NUM_FIRST.match(src)
    if m:
        num_str, quality = m.groups()
    else:
        m = _QUALITY_FIRST.match(src)
        if not m:
            return NO_INTERVAL
        quality, num_str = m.groups()
    number = int(num_str)
    if number < 1:
        return NO_INTERVAL
    step, octaves = (number - 1) % 7, (number - 1) // 7
    offset = _quality_offset(quality, step in PERFECTABLE_STEPS)
    if offset is None:
        return NO_INTERVAL
    width = STEP_SEMITONES[step] + offset + 12 * octaves
    return IntervalProps(name=f"{number}{quality}", number=number, quality=quality, width=width)


def interval_widths(names: List[str]) -> List[int]:
    return [parse_interval(n).width for n in names]
