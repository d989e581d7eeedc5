"""
cyfer — Banner route + config tests
===================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from fastapi.testclient import TestClient

from cyfer        import banner_payload, decode, InvalidArgument
from cyfer        import config
from cyfer.server import app


@pytest.fixture(name="client")
def client_fixture(monkeypatch):
    monkeypatch.delenv("CYFER_BANNER_TEXT", raising=False)
    monkeypatch.delenv("CYFER_BANNER_KEY", raising=False)
    return TestClient(app)

# ── Banner payload ───────────────────────────────────────────────────────────
def test_banner_payload_default_greeting():
    assert banner_payload("hola", "API Working") == {"msg": "API Working: -jI7PDs4-Dg="}

def test_banner_payload_decodes_back():
    msg = banner_payload("hola", "API Working")["msg"]
    encoded = msg.split(": ", 1)[1]
    assert decode(encoded, "API Working") == "hola"

def test_banner_payload_empty_key():
    with pytest.raises(InvalidArgument):
        banner_payload("hola", "")

# ── GET / ────────────────────────────────────────────────────────────────────
def test_default_route(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"msg": "API Working: -jI7PDs4-Dg="}

def test_default_route_reads_env(client, monkeypatch):
    monkeypatch.setenv("CYFER_BANNER_TEXT", "Hello, World!")
    monkeypatch.setenv("CYFER_BANNER_KEY", "MySecretKey")
    r = client.get("/")
    assert r.status_code == 200
    encoded = r.json()["msg"].split(": ", 1)[1]
    assert "O" not in encoded
    assert decode(encoded, "MySecretKey") == "Hello, World!"

def test_default_route_empty_key(client, monkeypatch):
    monkeypatch.setenv("CYFER_BANNER_KEY", "")
    r = client.get("/")
    assert r.status_code == 500

# ── Config ───────────────────────────────────────────────────────────────────
def test_config_defaults(monkeypatch):
    for var in ("CYFER_BANNER_TEXT", "CYFER_BANNER_KEY", "HOST", "PORT"):
        monkeypatch.delenv(var, raising=False)
    assert config.banner_text() == "hola"
    assert config.banner_key() == "API Working"
    assert config.host() == "0.0.0.0"
    assert config.port() == 3000

def test_config_bad_port_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert config.port() == 3000
    monkeypatch.setenv("PORT", "8080")
    assert config.port() == 8080
