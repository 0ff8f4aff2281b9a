# streamlit_app.py
# -*- coding: utf-8 -*-
"""
Streamlit-Seite: U.S.-Stromerzeugung nach Energieträger (1950-2023).
- Daten einmal pro Sitzung laden (Session-State), danach wiederverwenden
- Liniendiagramm mit festen Farben, Raster, Legende und Hover
- Download des Diagramms als PNG (mit Titel und Legende)
- Abruffehler werden nur geloggt, das Diagramm bleibt dann leer
"""
from __future__ import annotations
import logging
import streamlit as st

from ec_chart import SUBTITLE, TITLE, build_generation_figure
from ec_export import EXPORT_FILENAME, EXPORT_MIME, export_chart_png
from ec_fetch import load_generation_records

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="U.S. Electricity Generation", layout="centered")
st.title(TITLE)
st.caption(SUBTITLE)

# ---------------------------
# Session-State: Daten nur beim ersten Lauf holen
# ---------------------------
ss = st.session_state
if "records" not in ss:
    with st.spinner("Lade Daten..."):
        ss.records = load_generation_records()

# ---- Plot ----
fig = build_generation_figure(ss.records)
st.plotly_chart(fig)

# ---- PNG-Export (Renderfehler nur loggen, dann ohne Button) ----
try:
    png = export_chart_png(fig)
except Exception:
    logger.exception("PNG-Export fehlgeschlagen")
    png = None

if png is not None:
    st.download_button(
        label="Download as PNG",
        data=png,
        file_name=EXPORT_FILENAME,
        mime=EXPORT_MIME,
    )

# ---- Quellenangabe ----
st.markdown(
    "<div style='text-align:center; font-size:0.8em; color:gray;'>"
    "Quelle: <a href='https://www.eia.gov/energyexplained/electricity/electricity-in-the-us.php' "
    "target='_blank' style='color:gray; text-decoration:none;'>U.S. Energy Information Administration</a>"
    "</div>",
    unsafe_allow_html=True
)
