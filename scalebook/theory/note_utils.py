# scalebook/theory/note_utils.py
from __future__ import annotations

"""Note name parsing and pitch helpers for 12-TET.

Accepts names like "C", "c#4", "Eb3", "Fx5" or "Gbb". Parsing never raises:
an unparseable name gives a NoteProps with ``valid=False``.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional

NATURALS = "CDEFGAB"
LETTER_TO_PC: Dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

NOTE_REGEX = re.compile(r"^([a-gA-G])(#+|b+|x+|)(-?\d*)$")


@dataclass(frozen=True)
class NoteProps:
    name: str                # "C#4", or "C#" without octave
    pc: str                  # pitch-class name without octave
    letter: str              # "C".."B"
    accidental: str          # "", "#", "bb", "x", ...
    alt: int                 # signed semitone alteration
    octave: Optional[int]
    chroma: int              # pitch-class index 0..11
    midi: Optional[int]      # None when no octave given
    valid: bool = True


NO_NOTE = NoteProps(name="", pc="", letter="", accidental="", alt=0, octave=None, chroma=0, midi=None, valid=False)


def accidental_to_alt(acc: str) -> int:
    if not acc:
        return 0
    if acc[0] == "b":
        return -len(acc)
    if acc[0] == "x":
        return 2 * len(acc)
    return len(acc)


def alt_to_accidental(alt: int, double_sharp: str = "x") -> str:
    """Render a signed alteration. Exactly +2 uses the double-sharp glyph."""
    if alt == 2:
        return double_sharp
    if alt > 0:
        return "#" * alt
    return "b" * -alt


def parse_note(name: str) -> NoteProps:
    """Parse a note name into its parts (octave optional)."""
    if not isinstance(name, str):
        return NO_NOTE
    m = NOTE_REGEX.match(name.strip())
    if not m:
        return NO_NOTE
    letter, acc, oct_str = m.groups()
    if oct_str == "-":
        return NO_NOTE
    letter = letter.upper()
    alt = accidental_to_alt(acc)
    octave = int(oct_str) if oct_str else None
    step = LETTER_TO_PC[letter] + alt
    pc = letter + acc
    midi = note_name_to_midi(pc, octave) if octave is not None else None
    return NoteProps(
        name=pc if octave is None else f"{pc}{octave}",
        pc=pc,
        letter=letter,
        accidental=acc,
        alt=alt,
        octave=octave,
        chroma=step % 12,
        midi=midi,
    )


def note_name_to_midi(name: str, octave: int) -> int:
    """Middle C (C4) -> 60. ``name`` carries no octave; B#3 -> 60."""
    m = NOTE_REGEX.match(name)
    if not m or m.group(3):
        raise ValueError(f"Unsupported note name: {name}")
    pc = LETTER_TO_PC[m.group(1).upper()] + accidental_to_alt(m.group(2))
    return 12 * (octave + 1) + pc  # C4=60


def natural_midi(letter: str, octave: int) -> int:
    return 12 * (octave + 1) + LETTER_TO_PC[letter]


def next_letter(letter: str) -> str:
    return NATURALS[(NATURALS.index(letter) + 1) % 7]


def note_from_parts(letter: str, alt: int, octave: int, double_sharp: str = "x") -> NoteProps:
    """Build a NoteProps from already-resolved parts (no re-parsing)."""
    acc = alt_to_accidental(alt, double_sharp)
    pc = letter + acc
    return NoteProps(
        name=f"{pc}{octave}",
        pc=pc,
        letter=letter,
        accidental=acc,
        alt=alt,
        octave=octave,
        chroma=(LETTER_TO_PC[letter] + alt) % 12,
        midi=natural_midi(letter, octave) + alt,
    )
