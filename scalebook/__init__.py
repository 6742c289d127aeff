"""scalebook package initialization.

Scale types, pitch-class set algebra and scale queries for 12-TET:

    >>> from scalebook import get_scale, modes
    >>> get_scale("C major").notes
    ('C', 'D', 'E', 'F', 'G', 'A', 'B')
"""

from __future__ import annotations

from .config.config import ScalebookConfig, get_config, load_config, validate_config
from .tables import chord_types_frame, scale_types_frame
from .theory import (
    EMPTY_PCSET,
    NO_SCALE,
    NO_SCALE_TYPE,
    Chord,
    ChordType,
    IntervalProps,
    NoteProps,
    PcSet,
    Scale,
    ScaleType,
    contains_chord,
    extended,
    formula,
    get_chord,
    get_scale,
    harmonize,
    is_subset_of,
    is_superset_of,
    list_chord_types,
    list_scale_types,
    lookup_chord_type,
    lookup_scale_type,
    modes,
    modes_of,
    parse_interval,
    parse_note,
    pcset_from_chroma,
    pcset_from_setnum,
    pitch_classes,
    reduced,
    rotate,
    scale_chords,
    scale_type_names,
    scale_types_by_size,
    signature_of,
    to_steps,
    tokenize,
    transpose_pcset,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # config
    "ScalebookConfig",
    "get_config",
    "load_config",
    "validate_config",
    # tables
    "chord_types_frame",
    "scale_types_frame",
    # pitch-class sets
    "EMPTY_PCSET",
    "PcSet",
    "is_subset_of",
    "is_superset_of",
    "modes_of",
    "pcset_from_chroma",
    "pcset_from_setnum",
    "rotate",
    "signature_of",
    "transpose_pcset",
    # notes and intervals
    "IntervalProps",
    "NoteProps",
    "parse_interval",
    "parse_note",
    # dictionary
    "NO_SCALE_TYPE",
    "ScaleType",
    "list_scale_types",
    "lookup_scale_type",
    "scale_type_names",
    "scale_types_by_size",
    # scales
    "NO_SCALE",
    "Scale",
    "get_scale",
    "tokenize",
    # chords
    "Chord",
    "ChordType",
    "get_chord",
    "list_chord_types",
    "lookup_chord_type",
    # queries
    "contains_chord",
    "extended",
    "formula",
    "harmonize",
    "modes",
    "pitch_classes",
    "reduced",
    "scale_chords",
    "to_steps",
]
