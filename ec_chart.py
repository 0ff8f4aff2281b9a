# ec_chart.py
# -*- coding: utf-8 -*-
"""
Liniendiagramm (Plotly) für die Stromerzeugung nach Energieträger.
- Jahr auf der x-Achse, eine Linie pro Energieträger
- Feste Farben und Labels
- Gestricheltes Raster, horizontale Legende
- Hover: Jahr + Wert je Serie mit zwei Nachkommastellen und Einheit
"""
from __future__ import annotations
import math
from typing import List
import pandas as pd
import plotly.graph_objects as go

from ec_transform import COL_YEAR, SERIES_KEYS, GenerationRecord, records_to_frame

TITLE = "U.S. Electricity Generation by Major Energy Source (1950-2023)"
SUBTITLE = "Data shown in billion kilowatthours"
UNIT = "billion kWh"

# ---- Labels (Reihenfolge = Legende) ----
LABEL = {
    "coal": "Coal",
    "naturalGas": "Natural Gas",
    "nuclear": "Nuclear",
    "renewables": "Renewables",
    "petroleum": "Petroleum",
}

# ---- Feste Farben (Hex) ----
COLOR = {
    "coal": "#8b4513",          # dunkelbraun
    "naturalGas": "#1f77b4",    # blau
    "nuclear": "#9467bd",       # violett
    "renewables": "#2ca02c",    # grün
    "petroleum": "#d62728",     # rot
}

SERIES = [(k, LABEL[k]) for k in SERIES_KEYS]


def format_value(value: float) -> str:
    """1234.5678 -> '1234.57 billion kWh'."""
    if math.isnan(value):
        return f"NaN {UNIT}"
    if math.isinf(value):
        return f"{'-' if value < 0 else ''}Infinity {UNIT}"
    return f"{value:.2f} {UNIT}"


def _line_traces_from_df(df: pd.DataFrame) -> list[go.Scatter]:
    traces = []
    x = df[COL_YEAR]
    for i, (key, label) in enumerate(SERIES):
        y = pd.to_numeric(df[key], errors="coerce")
        # erste Linie trägt die Jahreszeile des Tooltips
        header = "Year: %{x}<br>" if i == 0 else ""
        traces.append(
            go.Scatter(
                x=x, y=y, name=label, mode="lines",
                line=dict(width=2, color=COLOR[key], shape="spline"),
                text=[format_value(v) for v in y],
                hovertemplate=f"{header}{label}: %{{text}}<extra></extra>",
            )
        )
    return traces


def build_generation_figure(records: List[GenerationRecord]) -> go.Figure:
    """Figure mit einer Linie pro Energieträger; ohne Records nur Achsen + Legende."""
    df = records_to_frame(records)
    layout = go.Layout(
        xaxis=dict(title="Year", showgrid=True, griddash="dash"),
        yaxis=dict(title=UNIT, showgrid=True, griddash="dash"),
        hovermode="x unified",
        legend=dict(orientation="h", y=-0.2),
        margin=dict(l=60, r=30, t=20, b=40),
        height=400,
    )
    return go.Figure(data=_line_traces_from_df(df), layout=layout)
