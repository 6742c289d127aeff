from __future__ import annotations

"""Pitch-class sets as 12-bit signatures.

A PcSet keeps three views of the same set: ``chroma`` ("101011010101"),
``setnum`` (the chroma read as binary, position 0 = most significant bit, so
the major scale is 2773) and ``normalized`` (the chroma rotated to start on
its lowest active position). Build them only through the factories below so
the three views never drift apart.
"""

from dataclasses import dataclass
from typing import Iterable, List, Union

from .intervals import parse_interval

CHROMA_LEN = 12


@dataclass(frozen=True)
class PcSet:
    setnum: int
    chroma: str
    normalized: str

    @property
    def length(self) -> int:
        return self.chroma.count("1")

    @property
    def empty(self) -> bool:
        return self.setnum == 0

    def pitch_classes(self) -> List[int]:
        return [i for i, bit in enumerate(self.chroma) if bit == "1"]


def is_chroma(value: object) -> bool:
    return (
        isinstance(value, str)
        and len(value) == CHROMA_LEN
        and all(ch in "01" for ch in value)
    )


def _normalize(chroma: str) -> str:
    first = chroma.find("1")
    if first <= 0:
        return chroma
    return chroma[first:] + chroma[:first]


def pcset_from_chroma(chroma: str) -> PcSet:
    if not is_chroma(chroma):
        raise ValueError(f"Invalid chroma: {chroma!r}")
    return PcSet(setnum=int(chroma, 2), chroma=chroma, normalized=_normalize(chroma))


def pcset_from_setnum(setnum: int) -> PcSet:
    if not 0 <= setnum < (1 << CHROMA_LEN):
        raise ValueError(f"Set number out of range: {setnum}")
    return pcset_from_chroma(format(setnum, "012b"))


EMPTY_PCSET = pcset_from_setnum(0)


def signature_of(intervals: Iterable[Union[str, int]]) -> PcSet:
    """Signature of a list of interval names or semitone widths.

    The root (position 0) is always included.
    """
    bits = ["0"] * CHROMA_LEN
    bits[0] = "1"
    for ivl in intervals:
        if isinstance(ivl, int):
            width = ivl
        else:
            props = parse_interval(ivl)
            if not props.valid:
                raise ValueError(f"Invalid interval: {ivl!r}")
            width = props.width
        bits[width % CHROMA_LEN] = "1"
    return pcset_from_chroma("".join(bits))


def rotate(pcset: PcSet, by: int) -> PcSet:
    """Cyclic left rotation: position i of the result is position (i + by) of the input."""
    n = by % CHROMA_LEN
    if n == 0:
        return pcset
    return pcset_from_chroma(pcset.chroma[n:] + pcset.chroma[:n])


def transpose_pcset(pcset: PcSet, tonic_chroma: int) -> PcSet:
    """Re-key a root-relative signature onto an absolute tonic pitch class."""
    return rotate(pcset, -tonic_chroma)


def is_subset_of(a: PcSet, b: PcSet) -> bool:
    """True if every pitch class in ``a`` is also in ``b``."""
    return a.setnum & b.setnum == a.setnum


def is_superset_of(a: PcSet, b: PcSet) -> bool:
    return is_subset_of(b, a)


def modes_of(pcset: PcSet) -> List[PcSet]:
    """One rotation per active position, in ascending order, each starting on that position.

    Symmetric sets yield repeated signatures; they stay aligned with the scale degrees.
    """
    return [rotate(pcset, i) for i in pcset.pitch_classes()]
