from __future__ import annotations

"""Tabular views of the scale and chord dictionaries (pandas)."""

from typing import Any, Dict, List

import pandas as pd

from .theory.chords import list_chord_types
from .theory.intervals import interval_widths
from .theory.scale_types import list_scale_types

# --- Constants ---

SCALE_COLUMNS = ["name", "aliases", "intervals", "formula", "chroma", "setnum", "normalized", "size"]
CHORD_COLUMNS = ["name", "symbol", "aliases", "intervals", "chroma", "setnum", "size"]

DTYPES = {
    "name": "string",
    "symbol": "string",
    "aliases": "string",
    "intervals": "string",
    "formula": "string",
    "chroma": "string",
    "normalized": "string",
    "setnum": "UInt16",
    "size": "UInt8",
}


def _frame(rows: List[Dict[str, Any]], columns: List[str]) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=columns)
    return df.astype({c: DTYPES[c] for c in columns})


def scale_types_frame() -> pd.DataFrame:
    """One row per canonical scale type, in dictionary order."""
    rows = [
        {
            "name": st.name,
            "aliases": ", ".join(st.aliases),
            "intervals": " ".join(st.intervals),
            "formula": "-".join(str(w) for w in interval_widths(list(st.intervals))),
            "chroma": st.chroma,
            "setnum": st.setnum,
            "normalized": st.signature.normalized,
            "size": st.length,
        }
        for st in list_scale_types()
    ]
    return _frame(rows, SCALE_COLUMNS)


def chord_types_frame() -> pd.DataFrame:
    rows = [
        {
            "name": ct.name,
            "symbol": ct.symbol,
            "aliases": ", ".join(ct.aliases),
            "intervals": " ".join(ct.intervals),
            "chroma": ct.signature.chroma,
            "setnum": ct.signature.setnum,
            "size": ct.signature.length,
        }
        for ct in list_chord_types()
    ]
    return _frame(rows, CHORD_COLUMNS)
