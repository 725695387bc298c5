import requests

from catalog_ui.config import API_BASE, PRODUCTS_PATH


def _collection_url() -> str:
    return f"{API_BASE}{PRODUCTS_PATH}"


def _item_url(product_id) -> str:
    return f"{API_BASE}{PRODUCTS_PATH}/{product_id}"


def list_products():
    res = requests.get(_collection_url())
    res.raise_for_status()
    return res.json()


def get_product(product_id):
    res = requests.get(_item_url(product_id))
    res.raise_for_status()
    return res.json()


# Write calls hand back the response body as text whatever the status code.

def create_product(payload: dict) -> str:
    res = requests.post(_collection_url(), json=payload)
    return res.text


def replace_product(product_id, payload: dict) -> str:
    res = requests.put(_item_url(product_id), json=payload)
    return res.text


def patch_product(product_id, payload: dict) -> str:
    res = requests.patch(_item_url(product_id), json=payload)
    return res.text


def delete_product(product_id) -> str:
    res = requests.delete(_item_url(product_id))
    return res.text
