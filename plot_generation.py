# plot_generation.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import io
import logging
import matplotlib.pyplot as plt
from PIL import Image

from ec_chart import build_generation_figure
from ec_export import export_chart_png
from ec_fetch import load_generation_records


def main():
    logging.basicConfig(level=logging.INFO)

    # 1) Live abrufen (ganzer Datensatz)
    records = load_generation_records()

    # 2) Diagramm bauen und wie beim Download exportieren
    fig = build_generation_figure(records)
    png = export_chart_png(fig)
    if png is None:
        return

    # 3) Exportbild anzeigen
    img = Image.open(io.BytesIO(png))
    fig_mpl, ax = plt.subplots(figsize=(img.width / 100, img.height / 100))
    ax.imshow(img)
    ax.axis("off")
    fig_mpl.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
