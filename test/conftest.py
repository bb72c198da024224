import importlib
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _build_flask_app(monkeypatch, extra_env=None):
    monkeypatch.setenv("FRONTEND_ORIGIN", "http://127.0.0.1:5000")

    if extra_env:
        for key, value in extra_env.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, value)

    return importlib.reload(importlib.import_module("client.main"))


@pytest.fixture
def flask_env(monkeypatch):
    """Prepara entorno aislado para pruebas del servidor Flask sin rate limiting."""
    return _build_flask_app(monkeypatch, {"LIMITER_ENABLED": "false"})


@pytest.fixture
def limited_flask_env(monkeypatch):
    """Flask app con rate limiting habilitado y umbrales bajos para pruebas."""
    extra_env = {
        "LIMITER_ENABLED": "true",
        "LIMITER_DEFAULT_RATE": "100 per minute",
    }
    return _build_flask_app(monkeypatch, extra_env)


@pytest.fixture
def line_document():
    """Tres puntos de la recta y = 10x con umbral 3."""
    return {
        "keys": {"n": 3, "k": 3},
        "1": {"base": "10", "value": "10"},
        "2": {"base": "10", "value": "20"},
        "3": {"base": "10", "value": "30"},
    }
