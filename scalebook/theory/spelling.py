from __future__ import annotations

"""Enharmonic spelling of scale notes.

Each degree takes the natural letter after the previous one and an
accidental covering the distance to the target pitch, so letters advance
exactly one step per degree.
"""

from functools import reduce
from typing import List, Sequence

from .note_utils import NoteProps, natural_midi, next_letter, note_from_parts


def next_scale_step(current: NoteProps, semitones: int, double_sharp: str = "x") -> NoteProps:
    """Spell the note ``semitones`` above ``current`` on the following letter."""
    target = current.midi + semitones
    letter = next_letter(current.letter)
    # nearest octave of the plain letter; ties go to the higher one
    octave = min(
        (current.octave - 1, current.octave, current.octave + 1),
        key=lambda o: (abs(target - natural_midi(letter, o)), -o),
    )
    alt = target - natural_midi(letter, octave)
    return note_from_parts(letter, alt, octave, double_sharp)


def spell_scale(tonic: NoteProps, widths: Sequence[int], double_sharp: str = "x") -> List[NoteProps]:
    """Spell one note per width, starting on ``tonic``.

    ``tonic`` must carry an octave (midi is needed); ``widths`` are ascending
    semitone distances from the tonic, the first being 0.
    """
    if not widths:
        return []
    steps = [b - a for a, b in zip(widths, widths[1:])]
    first = note_from_parts(tonic.letter, tonic.alt, tonic.octave, double_sharp)
    return reduce(
        lambda notes, step: notes + [next_scale_step(notes[-1], step, double_sharp)],
        steps,
        [first],
    )
