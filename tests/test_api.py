"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from descriptor_checksum.api.app import create_app
from descriptor_checksum.api.error_mapper import (
    ERROR_CHECKSUM_MISMATCH,
    ERROR_INVALID_CHARACTER,
    ERROR_INVALID_CHECKSUM_FORMAT,
    ERROR_INVALID_REQUEST,
    ERROR_MISSING_CHECKSUM,
)
from descriptor_checksum.config.models import AppConfig, ChecksumConfig


DESCRIPTOR = "addr(bc1qnehtvnd4fedkwjq6axfgsrxgllwne3k58rhdh0)"
CHECKSUMMED = DESCRIPTOR + "#s2y3vepm"


@pytest.fixture
def client():
    return TestClient(create_app(AppConfig()))


@pytest.fixture
def strict_client():
    return TestClient(create_app(AppConfig(checksum=ChecksumConfig(require_checksum=True))))


def test_health(client):
    response = client.get("/api/v1/descriptor/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_description(strict_client):
    value = strict_client.get("/management/description").json()["Value"]
    assert value["RequireChecksum"] is True


def test_checksum(client):
    response = client.post("/api/v1/descriptor/checksum", json={"descriptor": DESCRIPTOR})
    body = response.json()

    assert response.status_code == 200
    assert body == {"Value": "s2y3vepm", "ErrorNumber": 0, "ErrorMessage": ""}


def test_checksum_invalid_character(client):
    response = client.post("/api/v1/descriptor/checksum", json={"descriptor": "addr(é)"})
    body = response.json()

    assert response.status_code == 200
    assert body["Value"] is None
    assert body["ErrorNumber"] == ERROR_INVALID_CHARACTER
    assert "é" in body["ErrorMessage"]


def test_add(client):
    response = client.post("/api/v1/descriptor/add", json={"descriptor": DESCRIPTOR})
    assert response.json()["Value"] == CHECKSUMMED


def test_verify(client):
    response = client.post("/api/v1/descriptor/verify", json={"descriptor": CHECKSUMMED})
    assert response.json()["Value"] == DESCRIPTOR


def test_verify_mismatch(client):
    response = client.post("/api/v1/descriptor/verify", json={"descriptor": DESCRIPTOR + "#s2y3vepq"})
    body = response.json()

    assert body["ErrorNumber"] == ERROR_CHECKSUM_MISMATCH
    assert "s2y3vepm" in body["ErrorMessage"]


def test_verify_bad_format(client):
    response = client.post("/api/v1/descriptor/verify", json={"descriptor": DESCRIPTOR + "#abc"})
    assert response.json()["ErrorNumber"] == ERROR_INVALID_CHECKSUM_FORMAT


def test_verify_missing_checksum(client, strict_client):
    assert client.post("/api/v1/descriptor/verify", json={"descriptor": DESCRIPTOR}).json()["ErrorNumber"] == 0

    body = strict_client.post("/api/v1/descriptor/verify", json={"descriptor": DESCRIPTOR}).json()
    assert body["ErrorNumber"] == ERROR_MISSING_CHECKSUM


def test_missing_descriptor_field_uses_envelope(client):
    response = client.post("/api/v1/descriptor/checksum", json={})
    body = response.json()

    assert response.status_code == 200
    assert body["Value"] is None
    assert body["ErrorNumber"] == ERROR_INVALID_REQUEST
    assert "descriptor" in body["ErrorMessage"]
