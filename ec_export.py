# ec_export.py
# -*- coding: utf-8 -*-
"""
PNG-Export des Diagramms.
- Gerenderte Plotly-Figure per kaleido rastern (ohne eingebaute Legende)
- Raster auf weiße Fläche mit Titelband (zwei zentrierte Zeilen) oben
  und Legendenband (Farbfelder + Labels) unten setzen
- Ergebnis als PNG-Bytes für den Download-Button
"""
from __future__ import annotations
import io
import logging
from typing import List, Optional, Tuple

import plotly.graph_objects as go
from PIL import Image, ImageDraw, ImageFont

from ec_chart import SUBTITLE, TITLE

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "electricity-generation-chart.png"
EXPORT_MIME = "image/png"

# Raster-Geometrie (Pixel)
CHART_WIDTH = 800
CHART_HEIGHT = 400
TITLE_BAND = 80         # zusätzlicher Platz oben
LEGEND_BAND = 50        # zusätzlicher Platz unten
TITLE_Y = (20, 50)      # Oberkante der beiden Titelzeilen
TITLE_FONT_SIZE = (20, 14)
LEGEND_SWATCH = 15
LEGEND_SPACING = 140
LEGEND_GAP = 5          # Abstand Farbfeld -> Label
LEGEND_FONT_SIZE = 13
BACKGROUND = "#ffffff"
TEXT_COLOR = "#000000"
FALLBACK_COLOR = "#999999"

LegendEntry = Tuple[str, str]


def _line_traces(fig: Optional[go.Figure]) -> list:
    if fig is None:
        return []
    return [t for t in fig.data if t.type == "scatter" and "lines" in (t.mode or "")]


def legend_entries(fig: go.Figure) -> List[LegendEntry]:
    """(Label, Farbe) je Linie in Trace-Reihenfolge."""
    return [(t.name or "", t.line.color or FALLBACK_COLOR) for t in _line_traces(fig)]


def rasterize_figure(fig: go.Figure) -> Image.Image:
    """Plotly-Figure als Bild (CHART_WIDTH x CHART_HEIGHT); Legende kommt ins eigene Band."""
    export_fig = go.Figure(fig)
    export_fig.update_layout(showlegend=False)
    png = export_fig.to_image(format="png", width=CHART_WIDTH, height=CHART_HEIGHT, scale=1)
    return Image.open(io.BytesIO(png)).convert("RGB")


def _font(size: int):
    return ImageFont.load_default(size=size)


def compose_export_image(chart: Image.Image, entries: List[LegendEntry]) -> Image.Image:
    """Titelband + Diagramm + Legendenband auf weißer Fläche."""
    width = chart.width
    height = chart.height + TITLE_BAND + LEGEND_BAND
    canvas = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(canvas)

    # Titel: zwei zentrierte Zeilen
    for text, y, size in zip((TITLE, SUBTITLE), TITLE_Y, TITLE_FONT_SIZE):
        font = _font(size)
        x = (width - draw.textlength(text, font=font)) / 2
        draw.text((x, y), text, fill=TEXT_COLOR, font=font)

    canvas.paste(chart, (0, TITLE_BAND))

    # Legende: feste Abstände, Startpunkt zentriert
    font = _font(LEGEND_FONT_SIZE)
    legend_y = TITLE_BAND + chart.height + (LEGEND_BAND - LEGEND_SWATCH) // 2
    start_x = (width - len(entries) * LEGEND_SPACING) / 2
    for i, (label, color) in enumerate(entries):
        x = start_x + i * LEGEND_SPACING
        draw.rectangle([x, legend_y, x + LEGEND_SWATCH, legend_y + LEGEND_SWATCH], fill=color)
        draw.text((x + LEGEND_SWATCH + LEGEND_GAP, legend_y), label, fill=TEXT_COLOR, font=font)

    return canvas


def export_chart_png(fig: Optional[go.Figure]) -> Optional[bytes]:
    """Kompletter Export als PNG-Bytes; ohne Diagramm (None/keine Linien) -> None."""
    if not _line_traces(fig):
        logger.debug("Kein Diagramm für den Export gefunden")
        return None

    image = compose_export_image(rasterize_figure(fig), legend_entries(fig))
    out = io.BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()
