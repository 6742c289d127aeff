from __future__ import annotations

"""Scale-type dictionary.

Templates from ``data.SCALE_TEMPLATES`` are parsed once into ScaleType
values and indexed by canonical name, alias, set number and chroma. Every
table keeps the first entry registered for a key, so lookups by fingerprint
are deterministic when two named scales share a pitch-class set.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .data import SCALE_TEMPLATES
from .intervals import parse_interval
from .pcset import EMPTY_PCSET, PcSet, is_chroma, signature_of

ScaleTypeKey = Union[str, int]


@dataclass(frozen=True)
class ScaleType:
    name: str
    aliases: Tuple[str, ...]
    intervals: Tuple[str, ...]
    signature: PcSet

    @property
    def setnum(self) -> int:
        return self.signature.setnum

    @property
    def chroma(self) -> str:
        return self.signature.chroma

    @property
    def length(self) -> int:
        return len(self.intervals)

    @property
    def empty(self) -> bool:
        return not self.intervals


NO_SCALE_TYPE = ScaleType(name="", aliases=(), intervals=(), signature=EMPTY_PCSET)


@dataclass(frozen=True)
class ScaleTypeIndex:
    types: Tuple[ScaleType, ...]
    by_name: Dict[str, ScaleType] = field(default_factory=dict)
    by_alias: Dict[str, ScaleType] = field(default_factory=dict)
    by_setnum: Dict[int, ScaleType] = field(default_factory=dict)
    by_chroma: Dict[str, ScaleType] = field(default_factory=dict)

    def get(self, key: ScaleTypeKey) -> Optional[ScaleType]:
        # bool is an int subclass but never a fingerprint
        if isinstance(key, bool):
            return None
        if isinstance(key, int):
            return self.by_setnum.get(key)
        if not isinstance(key, str):
            return None
        k = key.strip()
        found = self.by_name.get(k) or self.by_alias.get(k)
        if found is None and is_chroma(k):
            found = self.by_chroma.get(k)
        return found


def to_scale_type(template: Sequence[str]) -> ScaleType:
    """Parse one (formula, name, *aliases) template. Raises ValueError on bad data."""
    if len(template) < 2:
        raise ValueError(f"Scale template needs a formula and a name: {template!r}")
    formula, name, *aliases = template
    if not name or not name.strip():
        raise ValueError(f"Scale template without a name: {template!r}")
    intervals = tuple(formula.split())
    if not intervals:
        raise ValueError(f"Scale {name!r} has an empty interval formula")
    for ivl in intervals:
        if not parse_interval(ivl).valid:
            raise ValueError(f"Scale {name!r} has an invalid interval {ivl!r}")
    signature = signature_of(intervals)
    if signature.length != len(intervals):
        raise ValueError(f"Scale {name!r} repeats a pitch class: {formula!r}")
    return ScaleType(name=name, aliases=tuple(aliases), intervals=intervals, signature=signature)


def build_scale_type_index(templates: Iterable[Sequence[str]]) -> ScaleTypeIndex:
    """Fold templates into an index, preserving their order."""
    types: List[ScaleType] = []
    by_name: Dict[str, ScaleType] = {}
    by_alias: Dict[str, ScaleType] = {}
    by_setnum: Dict[int, ScaleType] = {}
    by_chroma: Dict[str, ScaleType] = {}
    for template in templates:
        st = to_scale_type(template)
        if st.name in by_name:
            raise ValueError(f"Duplicate scale name: {st.name!r}")
        types.append(st)
        by_name[st.name] = st
        by_setnum.setdefault(st.setnum, st)
        by_chroma.setdefault(st.chroma, st)
        for alias in st.aliases:
            by_alias.setdefault(alias, st)
    return ScaleTypeIndex(
        types=tuple(types),
        by_name=by_name,
        by_alias=by_alias,
        by_setnum=by_setnum,
        by_chroma=by_chroma,
    )


@lru_cache(maxsize=None)
def scale_type_index() -> ScaleTypeIndex:
    """The process-wide dictionary, built on first use."""
    return build_scale_type_index(SCALE_TEMPLATES)


def lookup_scale_type(key: ScaleTypeKey) -> Optional[ScaleType]:
    """Find a scale type by name, alias, set number or chroma. None if unknown."""
    return scale_type_index().get(key)


def list_scale_types() -> List[ScaleType]:
    return list(scale_type_index().types)


def scale_type_names() -> List[str]:
    return [st.name for st in scale_type_index().types]


def scale_types_by_size(size: int) -> List[ScaleType]:
    return [st for st in scale_type_index().types if st.length == size]
