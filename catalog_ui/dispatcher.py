import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from catalog_ui.api import products as products_api
from catalog_ui.context import SubmitEvent, UIContext
from catalog_ui.renderer import CatalogRenderer
from catalog_ui.schemas import ProductCreate, ProductPatch, ProductReplace
from catalog_ui.status import StatusReporter

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    ok: bool
    message: str


class MutationDispatcher:
    """Sends one request per operation, reports the reply, then refreshes."""

    def __init__(self, ctx: UIContext, renderer: CatalogRenderer, status: StatusReporter):
        self.ctx = ctx
        self.renderer = renderer
        self.status = status

    async def _dispatch(
        self,
        call: Callable[[], str],
        color: str,
        failure: str,
        on_success: Optional[Callable[[], None]] = None,
    ) -> Outcome:
        try:
            message = await asyncio.to_thread(call)
        except requests.RequestException as e:
            logger.warning("%s: %s", failure, e)
            self.status.report(failure, "red")
            outcome = Outcome(False, failure)
        else:
            self.status.report(message, color)
            if on_success is not None:
                on_success()
            outcome = Outcome(True, message)

        await self.renderer.refresh()
        return outcome

    # ----------------------------
    # Form submissions
    # ----------------------------
    async def create(self, event: SubmitEvent) -> Outcome:
        event.prevent_default()
        form = self.ctx.add_form
        payload = ProductCreate(**form.fields).model_dump()
        logger.info("Adding product %r", payload["name"])

        return await self._dispatch(
            lambda: products_api.create_product(payload),
            color="green",
            failure="Failed to add product",
            on_success=form.reset,
        )

    async def replace(self, event: SubmitEvent) -> Outcome:
        event.prevent_default()
        form = self.ctx.replace_form
        payload = ProductReplace(**form.fields).model_dump()
        product_id = payload["id"]
        logger.info("Updating product %s", product_id)

        return await self._dispatch(
            lambda: products_api.replace_product(product_id, payload),
            color="blue",
            failure="Failed to update product",
            on_success=form.hide,
        )

    async def patch(self, event: SubmitEvent) -> Outcome:
        event.prevent_default()
        form = self.ctx.patch_form
        product_id = form["id"]
        payload = ProductPatch.from_inputs(
            name=form["name"],
            price=form["price"],
            category=form["category"],
            image_url=form["image_url"],
        ).payload()
        logger.info("Patching product %s with %s", product_id, sorted(payload))

        return await self._dispatch(
            lambda: products_api.patch_product(product_id, payload),
            color="orange",
            failure="Failed to patch product",
            on_success=form.hide,
        )

    # ----------------------------
    # Row actions
    # ----------------------------
    async def delete(self, product_id) -> Outcome:
        logger.info("Deleting product %s", product_id)
        return await self._dispatch(
            lambda: products_api.delete_product(product_id),
            color="red",
            failure="Failed to delete product",
        )
