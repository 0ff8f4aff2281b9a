"""Smoke tests for the Streamlit page with the HTTP layer and static export stubbed."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests
import streamlit as st
from streamlit.testing.v1 import AppTest

from ec_chart import SUBTITLE, TITLE

APP = str(Path(__file__).resolve().parent.parent / "streamlit_app.py")
PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def download_calls(monkeypatch) -> list:
    """Record the arguments of st.download_button while still rendering it."""

    calls: list = []
    original = st.download_button

    def _download_button(*args, **kwargs):
        calls.append(kwargs)
        return original(*args, **kwargs)

    monkeypatch.setattr(st, "download_button", _download_button)
    return calls


def test_page_loads_records_into_session(fake_get, fake_to_image) -> None:
    at = AppTest.from_file(APP, default_timeout=60).run()

    assert not at.exception
    assert at.title[0].value == TITLE
    assert at.caption[0].value == SUBTITLE
    assert [r.year for r in at.session_state["records"]] == [1950, 2020, 2023]


def test_records_are_fetched_once_per_session(fake_get, fake_to_image) -> None:
    at = AppTest.from_file(APP, default_timeout=60).run()
    at.run()

    assert len(fake_get["calls"]) == 1


def test_page_offers_png_download(fake_get, fake_to_image, download_calls) -> None:
    at = AppTest.from_file(APP, default_timeout=60).run()

    assert not at.exception
    buttons = at.get("download_button")
    assert len(buttons) == 1
    assert buttons[0].proto.label == "Download as PNG"

    (kwargs,) = download_calls
    assert kwargs["file_name"] == "electricity-generation-chart.png"
    assert kwargs["mime"] == "image/png"
    assert kwargs["data"].startswith(PNG_MAGIC)


def test_fetch_failure_leaves_chart_empty_without_error(fake_get, fake_to_image, download_calls) -> None:
    fake_get["exc"] = requests.ConnectionError("offline")

    at = AppTest.from_file(APP, default_timeout=60).run()

    assert not at.exception
    assert at.session_state["records"] == []
    assert len(at.error) == 0
    # Export läuft auch ohne Daten (Achsen, Titel, Legende)
    assert len(at.get("download_button")) == 1
    assert download_calls[0]["file_name"] == "electricity-generation-chart.png"
