"""Shared fixtures for the electricity chart tests."""

from __future__ import annotations

import pytest

SAMPLE_CSV = (
    "year,coal,naturalGas,nuclear,renewables,petroleum\n"
    "1950,154.52,44.56,0,100.88,33.73\n"
    "2020,1000,1500,800,700,300\n"
    "abc,1,2,3,4,5\n"
    "2023,675.26,1802.06,774.87,894.1,16.23\n"
)


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, text: str = "", status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        import requests

        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def fake_get(monkeypatch):
    """Patch requests.get; returns a dict the test fills with response/exception."""

    import requests

    state: dict = {"response": FakeResponse(SAMPLE_CSV), "exc": None, "calls": []}

    def _get(url, timeout=None):
        state["calls"].append((url, timeout))
        if state["exc"] is not None:
            raise state["exc"]
        return state["response"]

    monkeypatch.setattr(requests, "get", _get)
    return state


@pytest.fixture
def fake_to_image(monkeypatch):
    """Replace Plotly's static export (kaleido) with a flat gray PNG of the requested size."""

    import io

    import plotly.graph_objects as go
    from PIL import Image

    calls: list = []

    def _to_image(self, format=None, width=None, height=None, scale=None, **kwargs):
        calls.append({"format": format, "width": width, "height": height,
                      "showlegend": self.layout.showlegend, "traces": len(self.data)})
        buf = io.BytesIO()
        Image.new("RGB", (width, height), (200, 200, 200)).save(buf, format="PNG")
        return buf.getvalue()

    monkeypatch.setattr(go.Figure, "to_image", _to_image)
    return calls
