import asyncio
import logging
from html import escape
from typing import List

import pandas as pd
import requests

from catalog_ui.api import products as products_api
from catalog_ui.context import UIContext
from catalog_ui.schemas import Product, as_text

logger = logging.getLogger(__name__)

EMPTY_PLACEHOLDER = '<div class="empty">No products found.</div>'
ERROR_PLACEHOLDER = '<div class="empty">Failed to load products.</div>'

COLUMNS = ["ID", "Name", "Price", "Category"]


def row_cells(product: Product) -> List[str]:
    return [
        as_text(product.id),
        as_text(product.name),
        as_text(product.price),
        as_text(product.category or ""),
    ]


def render_table(products: List[Product]) -> str:
    rows = [[escape(cell) for cell in row_cells(p)] for p in products]
    df = pd.DataFrame(rows, columns=COLUMNS)
    # cells are escaped above; long values must not be truncated
    with pd.option_context("display.max_colwidth", None):
        return df.to_html(index=False, escape=False, border=0, classes="product-table")


class CatalogRenderer:
    def __init__(self, ctx: UIContext):
        self.ctx = ctx

    async def refresh(self) -> None:
        container = self.ctx.container
        try:
            data = await asyncio.to_thread(products_api.list_products)
            if not isinstance(data, list) or not data:
                logger.info("Catalog is empty")
                container.replace(EMPTY_PLACEHOLDER)
                return
            # only non-object items fail here; odd field values render as text
            products = [Product.model_validate(item) for item in data]
        except (requests.RequestException, ValueError) as e:
            logger.warning("Failed to load products: %s", e)
            container.replace(ERROR_PLACEHOLDER)
            return

        container.replace(render_table(products), products)
        logger.info("Rendered %d products", len(products))
