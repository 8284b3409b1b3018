import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import app


@pytest.fixture
def client():
    """
    Pytest fixture to provide a test client. Using TestClient as a context
    manager runs the application's lifespan events (startup and shutdown).
    """
    with TestClient(app) as test_client:
        yield test_client


# ===================================
# 1. Service Endpoints
# ===================================

def test_health_check(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_radices(client: TestClient):
    response = client.get("/api/v1/radices")
    assert response.status_code == 200
    radices = {item["name"]: item for item in response.json()}
    assert radices["OCTAL"] == {"name": "OCTAL", "base": 8, "alphabet": "01234567"}
    assert radices["HEXADECIMAL"]["base"] == 16


# ===================================
# 2. Codec Endpoints
# ===================================

def test_decode(client: TestClient):
    response = client.post("/api/v1/decode", json={"digits": "31646541", "radix": "OCTAL"})
    assert response.status_code == 200
    assert response.json() == {"radix": "OCTAL", "bytes": [103, 77, 97], "length": 3}


def test_decode_with_numeric_radix(client: TestClient):
    response = client.post("/api/v1/decode", json={"digits": "48656c6c6f", "radix": 16})
    assert response.status_code == 200
    data = response.json()
    assert data["radix"] == "HEXADECIMAL"
    assert data["bytes"] == [72, 101, 108, 108, 111]


def test_decode_empty_digits(client: TestClient):
    response = client.post("/api/v1/decode", json={"digits": None, "radix": "OCTAL"})
    assert response.status_code == 200
    assert response.json()["bytes"] == []
    assert response.json()["length"] == 0


def test_decode_invalid_digit(client: TestClient):
    response = client.post("/api/v1/decode", json={"digits": "123489", "radix": "OCTAL"})
    assert response.status_code == 422
    data = response.json()
    assert data["character"] == "8"
    assert data["index"] == 4
    assert "OCTAL" in data["error"]


def test_encode(client: TestClient):
    response = client.post("/api/v1/encode", json={"bytes": [103, 77, 97], "radix": 8})
    assert response.status_code == 200
    assert response.json() == {"radix": "OCTAL", "digits": "31646541", "length": 8}


def test_encode_empty_bytes(client: TestClient):
    response = client.post("/api/v1/encode", json={"bytes": [], "radix": "OCTAL"})
    assert response.status_code == 200
    assert response.json()["digits"] == ""


def test_encode_byte_out_of_range(client: TestClient):
    response = client.post("/api/v1/encode", json={"bytes": [-1, 256], "radix": "OCTAL"})
    assert response.status_code == 422
    data = response.json()
    assert data["index"] == 0
    assert data["value"] == -1


def test_encode_rejects_non_list_bytes(client: TestClient):
    response = client.post("/api/v1/encode", json={"bytes": "abc", "radix": "OCTAL"})
    assert response.status_code == 422


def test_unsupported_radix(client: TestClient):
    response = client.post("/api/v1/decode", json={"digits": "12", "radix": "ternary"})
    assert response.status_code == 400
    assert "Unsupported radix" in response.json()["error"]


def test_decode_chunks(client: TestClient):
    response = client.post(
        "/api/v1/decode/chunks",
        json={"digits": "3164654131646541", "radix": "OCTAL", "chunk_size": 8}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["chunk_size"] == 8
    assert data["chunks"] == [[103, 77, 97], [103, 77, 97]]


def test_decode_chunks_rejects_zero_chunk_size(client: TestClient):
    response = client.post(
        "/api/v1/decode/chunks",
        json={"digits": "31646541", "radix": "OCTAL", "chunk_size": 0}
    )
    assert response.status_code == 422


def test_input_too_large(client: TestClient, monkeypatch):
    monkeypatch.setattr("config.MAX_INPUT_LENGTH", 4)
    response = client.post("/api/v1/decode", json={"digits": "31646541", "radix": "OCTAL"})
    assert response.status_code == 413
    response = client.post("/api/v1/encode", json={"bytes": [1, 2, 3, 4, 5], "radix": "OCTAL"})
    assert response.status_code == 413


def test_routing_errors_use_error_shape(client: TestClient):
    response = client.get("/api/v1/missing")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}

    response = client.get("/api/v1/decode")
    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}
