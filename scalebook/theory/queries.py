from __future__ import annotations

"""Queries over the scale dictionary: related scales, modes, steps, chords.

Set comparisons use each scale type's root-relative signature, so the key a
scale is given in does not change the answer.
"""

from typing import List, Optional, Sequence, Tuple

from ..config.config import ScalebookConfig, get_config
from .chords import ChordSource, get_chord, list_chord_types
from .note_utils import note_name_to_midi, parse_note
from .pcset import is_subset_of, is_superset_of, modes_of
from .scale import Scale, ScaleSource, get_scale
from .scale_types import list_scale_types, lookup_scale_type

ScaleMode = Tuple[str, str]  # (tonic or interval, mode name)


def _scale_of(src: ScaleSource | Scale) -> Scale:
    return src if isinstance(src, Scale) else get_scale(src)


def extended(src: ScaleSource | Scale) -> List[str]:
    """Names of scales with the same notes and at least one more.

    extended("major") -> ["bebop", "bebop dominant", "bebop major", "ichikosucho", ...]
    """
    s = _scale_of(src)
    if not s.valid:
        return []
    base = s.scale_type.signature
    return [
        st.name
        for st in list_scale_types()
        if st.setnum != base.setnum and is_superset_of(st.signature, base)
    ]


def reduced(src: ScaleSource | Scale) -> List[str]:
    """Names of scales whose notes all belong to the given one (and are fewer).

    reduced("major") -> ["major pentatonic", "ionian pentatonic", "ritusen"]
    """
    s = _scale_of(src)
    if not s.valid:
        return []
    base = s.scale_type.signature
    return [
        st.name
        for st in list_scale_types()
        if st.setnum != base.setnum and is_subset_of(st.signature, base)
    ]


def modes(src: ScaleSource | Scale) -> List[ScaleMode]:
    """Named modes of a scale, one per degree that has a name.

    modes("C major pentatonic") -> [("C", "major pentatonic"), ("D", "egyptian"), ...]
    Unrooted scales label each mode with its interval instead of a note.
    """
    s = _scale_of(src)
    if not s.valid:
        return []
    labels: Sequence[str] = s.notes if s.tonic else s.intervals
    result: List[ScaleMode] = []
    for label, rotation in zip(labels, modes_of(s.scale_type.signature)):
        st = lookup_scale_type(rotation.chroma)
        if st is not None:
            result.append((label, st.name))
    return result


def formula(src: ScaleSource | Scale) -> List[int]:
    return list(_scale_of(src).formula)


def to_steps(
    src: ScaleSource | Scale,
    close_octave: Optional[bool] = None,
    config: Optional[ScalebookConfig] = None,
) -> List[str]:
    """Whole/half/augmented steps between consecutive degrees.

    With ``close_octave`` the step from the last degree back to the octave is
    included, so to_steps("major") -> ["W", "W", "H", "W", "W", "W", "H"].
    """
    config = config or get_config()
    symbols = config.steps
    if close_octave is None:
        close_octave = symbols.close_octave
    widths = list(_scale_of(src).formula)
    if not widths:
        return []
    if close_octave:
        widths.append(widths[0] + 12)
    steps = []
    for prev, cur in zip(widths, widths[1:]):
        diff = cur - prev
        steps.append(symbols.half if diff == 1 else symbols.whole if diff == 2 else symbols.augmented)
    return steps


def pitch_classes(names: Sequence[str], config: Optional[ScalebookConfig] = None) -> List[str]:
    """Pitch classes of the valid notes, ordered by pitch, without repeats.

    pitch_classes(["D4", "c#5", "A5", "F#6"]) -> ["D", "F#", "A", "C#"]
    Names without an octave are placed in the configured default octave.
    """
    octave = (config or get_config()).spelling.default_octave
    notes = [n for n in (parse_note(name) for name in names) if n.valid]
    notes.sort(key=lambda n: n.midi if n.midi is not None else note_name_to_midi(n.pc, octave))
    result: List[str] = []
    for n in notes:
        if not result or result[-1] != n.pc:
            result.append(n.pc)
    return result


def scale_chords(src: ScaleSource | Scale) -> List[str]:
    """Chords built on the scale's root that fit inside the scale.

    scale_chords("pentatonic") -> ["M", "6", "6/9", "Madd9", "Msus2", "5"]
    """
    s = _scale_of(src)
    if not s.valid:
        return []
    base = s.scale_type.signature
    return [ct.symbol for ct in list_chord_types() if is_subset_of(ct.signature, base)]


def contains_chord(scale_src: ScaleSource | Scale, chord_src: ChordSource) -> bool:
    """True if every note of the chord (on its root) is in the scale (on its tonic)."""
    s = _scale_of(scale_src)
    chord = get_chord(chord_src)
    if not s.valid or not chord.valid:
        return False
    return is_subset_of(chord.signature, s.signature)


def harmonize(scale_src: ScaleSource | Scale, chord_types: Sequence[str]) -> List[str]:
    """For each scale note, the first of ``chord_types`` that fits the scale on that note.

    harmonize("C major", ["maj7", "m7", "7", "m7b5"])
        -> ["Cmaj7", "Dm7", "Em7", "Fmaj7", "G7", "Am7", "Bm7b5"]
    A degree with no fitting chord gets "".
    """
    s = _scale_of(scale_src)
    if not s.valid or not s.tonic:
        return []
    result = []
    for note in s.notes:
        pc = parse_note(note).pc
        fitting = ""
        for type_name in chord_types:
            chord = get_chord((pc, type_name))
            if chord.valid and is_subset_of(chord.signature, s.signature):
                fitting = chord.name
                break
        result.append(fitting)
    return result
