# ec_fetch.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
from typing import List
import requests

from ec_transform import GenerationRecord, parse_generation_csv

logger = logging.getLogger(__name__)

# Fester Datensatz: U.S. Electricity Generation by Major Energy Source (1950-2023)
CSV_URL = (
    "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
    "Electricity%20Generation%20Major%20Source-jPNbgGj5RdiFlV4x9rYX8d8EESsVU8.csv"
)
REQUEST_TIMEOUT = 30  # Sekunden


def fetch_generation_csv(url: str = CSV_URL, timeout: float = REQUEST_TIMEOUT) -> str:
    """
    Holt die CSV-Datei als Text (ein GET, kein Retry).
    Netzwerkfehler und Nicht-2xx-Status werfen requests.RequestException.
    """
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.text


def load_generation_records(url: str = CSV_URL) -> List[GenerationRecord]:
    """Abruf + Parsing. Bei Abruffehlern wird geloggt und eine leere Liste geliefert."""
    try:
        text = fetch_generation_csv(url)
    except requests.RequestException:
        logger.exception("Error fetching data from %s", url)
        return []

    records = parse_generation_csv(text)
    logger.info("%d Jahresdatensätze geladen", len(records))
    return records
