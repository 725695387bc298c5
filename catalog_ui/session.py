import asyncio
import logging
from typing import Optional

import requests

from catalog_ui.api import products as products_api
from catalog_ui.context import UIContext
from catalog_ui.dispatcher import MutationDispatcher, Outcome
from catalog_ui.forms import FormController
from catalog_ui.renderer import CatalogRenderer
from catalog_ui.schemas import Product
from catalog_ui.status import StatusReporter

logger = logging.getLogger(__name__)


class CatalogSession:
    """One catalog page: context, components and the form wiring."""

    def __init__(
        self,
        ctx: Optional[UIContext] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.ctx = ctx or UIContext()
        self.status = StatusReporter(self.ctx.status, loop=loop)
        self.renderer = CatalogRenderer(self.ctx)
        self.forms = FormController(self.ctx)
        self.dispatcher = MutationDispatcher(self.ctx, self.renderer, self.status)

        self.ctx.add_form.on_submit(self.dispatcher.create)
        self.ctx.replace_form.on_submit(self.dispatcher.replace)
        self.ctx.patch_form.on_submit(self.dispatcher.patch)

    async def load(self) -> None:
        self.forms.hide_edit_forms()
        await self.renderer.refresh()

    async def edit(self, product_id) -> bool:
        if self.forms.edit_row(product_id):
            return True

        # not on screen any more; ask the server for the current row
        try:
            data = await asyncio.to_thread(products_api.get_product, product_id)
            product = Product.model_validate(data)
        except (requests.RequestException, ValueError) as e:
            logger.warning("Could not load product %s: %s", product_id, e)
            return False
        self.forms.open_replace_form(product.id, product.name, product.price, product.category)
        return True

    async def row_action(self, action: str, product_id) -> Optional[Outcome]:
        if action == "edit":
            await self.edit(product_id)
        elif action == "patch":
            self.forms.open_patch_form(product_id)
        elif action == "delete":
            return await self.dispatcher.delete(product_id)
        else:
            raise ValueError(f"Unknown row action: {action}")
        return None
