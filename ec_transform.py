# ec_transform.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from dataclasses import dataclass
import logging
import math
import re
from typing import List, Optional
import pandas as pd

logger = logging.getLogger(__name__)

COL_YEAR = "year"

# --- Reihenfolge der CSV-Spalten (nach "year") = Serien-Schlüssel ---
SERIES_KEYS = [
    "coal",
    "naturalGas",
    "nuclear",
    "renewables",
    "petroleum",
]

# Spaltenname -> Attribut im Record
ATTR_MAP = {
    "coal": "coal",
    "naturalGas": "natural_gas",
    "nuclear": "nuclear",
    "renewables": "renewables",
    "petroleum": "petroleum",
}

# führende Zahl wie bei parseFloat/parseInt im Browser (nur ASCII-Ziffern)
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)
_INT_PREFIX = re.compile(r"[+-]?\d+", re.ASCII)


@dataclass(frozen=True)
class GenerationRecord:
    """Ein Jahr Stromerzeugung nach Energieträger, in Mrd. kWh."""
    year: int
    coal: float
    natural_gas: float
    nuclear: float
    renewables: float
    petroleum: float

    def value(self, key: str) -> float:
        return getattr(self, ATTR_MAP[key])


def parse_leading_float(text: str) -> float:
    """Längstes numerisches Präfix als float, sonst NaN ("300\\r" -> 300.0)."""
    m = _FLOAT_PREFIX.match(text.lstrip())
    if not m:
        return math.nan
    token = m.group(0)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def parse_leading_int(text: str) -> Optional[int]:
    """Ganzzahl-Präfix ("2020.7" -> 2020), None wenn keins vorhanden."""
    m = _INT_PREFIX.match(text.lstrip())
    return int(m.group(0)) if m else None


def _parse_row(row: str) -> Optional[GenerationRecord]:
    fields = row.split(",")
    # fehlende Felder wie leerer Text behandeln, überzählige ignorieren
    fields += [""] * (1 + len(SERIES_KEYS) - len(fields))
    year = parse_leading_int(fields[0])
    if year is None:
        return None
    values = {ATTR_MAP[k]: parse_leading_float(v) for k, v in zip(SERIES_KEYS, fields[1:])}
    return GenerationRecord(year=year, **values)


def parse_generation_csv(text: str) -> List[GenerationRecord]:
    """
    Zerlegt den CSV-Text (Header + Zeilen year,coal,naturalGas,nuclear,renewables,petroleum)
    in GenerationRecords. Die erste Zeile wird immer verworfen, Zeilen ohne gültiges
    Jahr fallen weg, die Reihenfolge bleibt erhalten.
    """
    records: List[GenerationRecord] = []
    for row in text.split("\n")[1:]:
        rec = _parse_row(row)
        if rec is None:
            logger.debug("Zeile ohne gültiges Jahr verworfen: %r", row)
            continue
        records.append(rec)
    return records


def records_to_frame(records: List[GenerationRecord]) -> pd.DataFrame:
    """Records als DataFrame (year + Serien-Spalten), auch wenn leer."""
    cols = [COL_YEAR] + SERIES_KEYS
    rows = [[r.year] + [r.value(k) for k in SERIES_KEYS] for r in records]
    df = pd.DataFrame(rows, columns=cols)
    df[COL_YEAR] = df[COL_YEAR].astype("int64")
    for c in SERIES_KEYS:
        df[c] = df[c].astype("float64")
    return df
