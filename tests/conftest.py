"""Shared test fixtures for the farm-to-table storefront."""

import json
import os
import tempfile
from typing import Any, Optional
from urllib.parse import urlsplit

# Point the app at a throwaway SQLite file before config.settings is built.
_DB_DIR = tempfile.mkdtemp(prefix="farm_to_table_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["BACKEND_URL"] = "http://backend.test"

import pytest
import requests
from fastapi.testclient import TestClient

import schemas


def make_product(id: Any = 1, name: str = "Orange", price: float = 99, type: str = "Fruit",
                 quantity: int = 10, image_url: str = "https://img.test/orange.jpg") -> schemas.Product:
    return schemas.Product(
        _id=id, name=name, imageUrl=image_url, description="", type=type, price=price, quantity=quantity,
    )


def make_response(status_code: int = 200, body: Any = None, reason: str = "OK", raw: Optional[bytes] = None) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def sample_products():
    """A small mixed catalog in insertion order."""
    return [
        make_product(1, "Orange", 99, "Fruit", 120),
        make_product(2, "Orange orange", 299, "Fruit", 40),
        make_product(3, "Brown Rice", 65, "Grain", 300),
        make_product(4, "carabao milk", 120, "Dairy", 25),
        make_product(5, "Eggplant", 80, "Vegetable", 60),
        make_product(6, "Mango", 99, "Fruit", 60),
    ]


@pytest.fixture
def db():
    """A fresh schema for every test."""
    from database import Base, SessionLocal, engine
    import models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api(db):
    from main import app

    with TestClient(app) as client:
        yield client


def signup_and_login(api: TestClient, username: str, password: str = "secret123", user_type: str = "customer") -> str:
    resp = api.post("/auth/signup", json={"username": username, "password": password, "user_type": user_type})
    assert resp.status_code == 201, resp.text
    resp = api.post("/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


@pytest.fixture
def customer_token(api):
    return signup_and_login(api, "juan", user_type="customer")


@pytest.fixture
def merchant_token(api):
    return signup_and_login(api, "farmer", user_type="merchant")


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def requests_to_api(api, monkeypatch):
    """Route storefront_client's requests calls into the in-process FastAPI app."""
    import storefront_client

    def _request(method, url, headers=None, json=None, timeout=None):
        r = api.request(method, urlsplit(url).path, headers=headers, json=json)
        response = make_response(r.status_code, raw=r.content, reason=r.reason_phrase)
        response.url = url
        return response

    monkeypatch.setattr(storefront_client.requests, "request", _request)
    return api
