from __future__ import annotations

"""Chord catalog: chord types and chords on a root.

Only what scale queries need: each chord type's signature, and a chord's
absolute signature once placed on a root.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .data import CHORD_TEMPLATES
from .intervals import parse_interval
from .note_utils import parse_note
from .pcset import EMPTY_PCSET, PcSet, signature_of, transpose_pcset

ChordSource = Union[str, Sequence[str]]


@dataclass(frozen=True)
class ChordType:
    name: str
    aliases: Tuple[str, ...]
    intervals: Tuple[str, ...]
    signature: PcSet

    @property
    def symbol(self) -> str:
        """Short symbol used in query results (e.g., 'maj7')."""
        return self.aliases[0] if self.aliases else self.name


@dataclass(frozen=True)
class Chord:
    """A chord type placed on a root (e.g., 'D m7')."""

    chord_type: Optional[ChordType]
    root: str
    signature: PcSet

    @property
    def valid(self) -> bool:
        return self.chord_type is not None

    @property
    def name(self) -> str:
        if self.chord_type is None:
            return ""
        return f"{self.root}{self.chord_type.symbol}" if self.root else self.chord_type.symbol


NO_CHORD = Chord(chord_type=None, root="", signature=EMPTY_PCSET)


def _to_chord_type(template: Sequence[str]) -> ChordType:
    formula, name, *aliases = template
    intervals = tuple(formula.split())
    for ivl in intervals:
        if not parse_interval(ivl).valid:
            raise ValueError(f"Chord {name or aliases[0]!r} has an invalid interval {ivl!r}")
    return ChordType(name=name, aliases=tuple(aliases), intervals=intervals, signature=signature_of(intervals))


@lru_cache(maxsize=None)
def _chord_index() -> Tuple[Tuple[ChordType, ...], Dict[str, ChordType]]:
    types = tuple(_to_chord_type(t) for t in CHORD_TEMPLATES)
    by_key: Dict[str, ChordType] = {}
    for ct in types:
        if ct.name:
            by_key.setdefault(ct.name, ct)
    for ct in types:
        for alias in ct.aliases:
            by_key.setdefault(alias, ct)
    return types, by_key


def list_chord_types() -> List[ChordType]:
    return list(_chord_index()[0])


def lookup_chord_type(key: str) -> Optional[ChordType]:
    if not isinstance(key, str):
        return None
    return _chord_index()[1].get(key.strip())


def tokenize_chord(src: str) -> Tuple[str, str]:
    """Split "C maj7" or "Cmaj7" into (root, type). Root is "" when absent."""
    src = src.strip()
    if " " in src:
        head, rest = src.split(" ", 1)
        note = parse_note(head)
        if note.valid:
            return note.pc, rest.strip()
        return "", src
    if lookup_chord_type(src) is not None:
        return "", src
    # longest note-name prefix without octave digits
    for cut in (3, 2, 1):
        head = src[:cut]
        note = parse_note(head)
        if note.valid and note.octave is None:
            return note.pc, src[cut:]
    return "", src


def get_chord(src: ChordSource) -> Chord:
    if isinstance(src, str):
        root_name, type_name = tokenize_chord(src)
    else:
        parts = list(src) + ["", ""]
        root_name, type_name = str(parts[0]), str(parts[1])
    root = parse_note(root_name)
    # a bare root is a major triad
    ct = lookup_chord_type(type_name or ("M" if root.valid else ""))
    if ct is None:
        return NO_CHORD
    if not root.valid:
        return Chord(chord_type=ct, root="", signature=ct.signature)
    return Chord(chord_type=ct, root=root.pc, signature=transpose_pcset(ct.signature, root.chroma))
