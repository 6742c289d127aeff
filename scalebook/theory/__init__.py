"""Scale theory layer: pitch-class sets, the scale dictionary, scales and queries."""

from .note_utils import NoteProps, parse_note  # noqa: F401
from .intervals import IntervalProps, parse_interval  # noqa: F401
from .pcset import (  # noqa: F401
    EMPTY_PCSET,
    PcSet,
    is_subset_of,
    is_superset_of,
    modes_of,
    pcset_from_chroma,
    pcset_from_setnum,
    rotate,
    signature_of,
    transpose_pcset,
)
from .scale_types import (  # noqa: F401
    NO_SCALE_TYPE,
    ScaleType,
    list_scale_types,
    lookup_scale_type,
    scale_type_names,
    scale_types_by_size,
)
from .scale import NO_SCALE, Scale, get_scale, tokenize  # noqa: F401
from .chords import Chord, ChordType, get_chord, list_chord_types, lookup_chord_type  # noqa: F401
from .queries import (  # noqa: F401
    contains_chord,
    extended,
    formula,
    harmonize,
    modes,
    pitch_classes,
    reduced,
    scale_chords,
    to_steps,
)
