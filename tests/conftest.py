"""Pytest fixtures for the catalog UI tests."""

import json

import pytest
import requests

from catalog_ui.api import products as products_api
from catalog_ui.config import API_BASE, PRODUCTS_PATH
from catalog_ui.session import CatalogSession

COLLECTION_URL = f"{API_BASE}{PRODUCTS_PATH}"


def item_url(product_id):
    return f"{COLLECTION_URL}/{product_id}"


def make_response(status_code=200, text="", json_body=None):
    response = requests.Response()
    response.status_code = status_code
    if json_body is not None:
        text = json.dumps(json_body)
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeBackend:
    """Stands in for the /products REST API by replacing the requests calls."""

    def __init__(self):
        self.calls = []
        self.products = []
        self.list_body = None
        self.list_error = None
        self.write_text = "OK"
        self.write_status = 200
        self.write_error = None

    def reads(self):
        return [c for c in self.calls if c[0] == "GET" and c[1] == COLLECTION_URL]

    def writes(self):
        return [c for c in self.calls if c[0] != "GET"]

    def get(self, url, **kwargs):
        self.calls.append(("GET", url, None))
        if url == COLLECTION_URL:
            if self.list_error is not None:
                raise self.list_error
            if self.list_body is not None:
                return make_response(text=self.list_body)
            return make_response(json_body=self.products)

        product_id = url.rsplit("/", 1)[-1]
        for product in self.products:
            if str(product["id"]) == product_id:
                return make_response(json_body=product)
        return make_response(status_code=404, text="")

    def _write(self, method, url, json=None, **kwargs):
        self.calls.append((method, url, json))
        if self.write_error is not None:
            raise self.write_error
        return make_response(status_code=self.write_status, text=self.write_text)

    def post(self, url, json=None, **kwargs):
        return self._write("POST", url, json)

    def put(self, url, json=None, **kwargs):
        return self._write("PUT", url, json)

    def patch(self, url, json=None, **kwargs):
        return self._write("PATCH", url, json)

    def delete(self, url, **kwargs):
        return self._write("DELETE", url)


@pytest.fixture
def backend(monkeypatch):
    fake = FakeBackend()
    for method in ("get", "post", "put", "patch", "delete"):
        monkeypatch.setattr(products_api.requests, method, getattr(fake, method))
    return fake


@pytest.fixture
def session(backend):
    return CatalogSession()


@pytest.fixture
def sample_products():
    return [
        {"id": 1, "name": "Widget", "price": 9.99, "category": "Tools"},
        {"id": 2, "name": "Gadget", "price": 25, "category": None},
        {"id": 3, "name": "Bob's Thing", "price": 3.5},
    ]
