from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..config.config import ScalebookConfig, get_config
from .intervals import interval_widths
from .note_utils import NoteProps, note_from_parts, parse_note
from .pcset import EMPTY_PCSET, PcSet, transpose_pcset
from .scale_types import NO_SCALE_TYPE, ScaleType, lookup_scale_type
from .spelling import spell_scale

ScaleTokens = Tuple[str, str, str]  # tonic, type name, octave
ScaleSource = Union[str, Sequence[str]]


@dataclass(frozen=True)
class Scale:
    """A scale type, optionally placed on a tonic (e.g., "Eb dorian").

    ``signature`` is root-relative for unrooted scales and absolute (C = 0)
    once a tonic is set. ``notes`` is empty for unrooted scales.
    """

    scale_type: ScaleType
    name: str
    tonic: str
    signature: PcSet
    notes: Tuple[str, ...]
    formula: Tuple[int, ...]
    valid: bool = True

    @property
    def type_name(self) -> str:
        return self.scale_type.name

    @property
    def aliases(self) -> Tuple[str, ...]:
        return self.scale_type.aliases

    @property
    def intervals(self) -> Tuple[str, ...]:
        return self.scale_type.intervals

    @property
    def chroma(self) -> str:
        return self.signature.chroma

    @property
    def setnum(self) -> int:
        return self.signature.setnum

    @property
    def normalized(self) -> str:
        return self.signature.normalized

    @property
    def length(self) -> int:
        return len(self.intervals)

    @property
    def empty(self) -> bool:
        return not self.valid

    @property
    def formula_string(self) -> str:
        return "-".join(str(w) for w in self.formula)

    def transpose(self, new_tonic: str) -> "Scale":
        if not self.valid:
            return self
        return get_scale((new_tonic, self.scale_type.name))


NO_SCALE = Scale(
    scale_type=NO_SCALE_TYPE,
    name="",
    tonic="",
    signature=EMPTY_PCSET,
    notes=(),
    formula=(),
    valid=False,
)


def tokenize(src: str) -> ScaleTokens:
    """Split "C4 major" into ("C", "major", "4").

    The first word counts as a tonic only if it is a note name; otherwise the
    whole string is the type name. The type name is not checked here.

        tokenize("C mixolydian")      -> ("C", "mixolydian", "")
        tokenize("anything is valid") -> ("", "anything is valid", "")
        tokenize("")                  -> ("", "", "")
    """
    if not isinstance(src, str):
        return ("", "", "")
    tokens = src.strip().split(" ")
    note = parse_note(tokens[0])
    if note.valid:
        octave = "" if note.octave is None else str(note.octave)
        return (note.pc, " ".join(tokens[1:]), octave)
    return ("", " ".join(tokens), "")


def _tokens_of(src: ScaleSource) -> ScaleTokens:
    if isinstance(src, str):
        return tokenize(src)
    if not isinstance(src, (list, tuple)):
        return ("", "", "")
    parts: List[str] = [str(p) if p is not None else "" for p in src][:3]
    parts += [""] * (3 - len(parts))
    return (parts[0], parts[1], parts[2])


def _spell(root: NoteProps, st: ScaleType, config: ScalebookConfig) -> List[NoteProps]:
    double_sharp = config.spelling.double_sharp
    octave = root.octave if root.octave is not None else config.spelling.default_octave
    tonic = note_from_parts(root.letter, root.alt, octave, double_sharp)
    return spell_scale(tonic, interval_widths(list(st.intervals)), double_sharp)


def get_scale(src: ScaleSource, config: Optional[ScalebookConfig] = None) -> Scale:
    """Build a Scale from "C major", "major", "C4 major" or ("C", "major"[, "4"]).

    Unknown types give NO_SCALE. An invalid or missing tonic gives a valid
    unrooted scale without notes.
    """
    config = config or get_config()
    tonic_name, type_name, octave = _tokens_of(src)
    st = lookup_scale_type(type_name) or NO_SCALE_TYPE
    if st.empty:
        return NO_SCALE

    formula = tuple(interval_widths(list(st.intervals)))
    root = parse_note(f"{tonic_name}{octave}")
    if not root.valid:
        return Scale(
            scale_type=st,
            name=st.name,
            tonic="",
            signature=st.signature,
            notes=(),
            formula=formula,
        )

    spelled = _spell(root, st, config)
    if root.octave is None:
        notes = tuple(n.pc for n in spelled)
    else:
        notes = tuple(n.name for n in spelled)
    tonic_pc = spelled[0].pc
    return Scale(
        scale_type=st,
        name=f"{tonic_pc} {st.name}",
        tonic=tonic_pc,
        signature=transpose_pcset(st.signature, root.chroma),
        notes=notes,
        formula=formula,
    )

