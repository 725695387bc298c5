import logging

from catalog_ui.context import UIContext

logger = logging.getLogger(__name__)


class FormController:
    """Edit-form visibility. At most one of replace/patch is open."""

    def __init__(self, ctx: UIContext):
        self.ctx = ctx

    def hide_edit_forms(self) -> None:
        self.ctx.replace_form.hide()
        self.ctx.patch_form.hide()

    def open_replace_form(self, product_id, name, price, category=None) -> None:
        self.ctx.replace_form.fill(
            id=product_id, name=name, price=price, category=category or ""
        )
        self.ctx.replace_form.show()
        self.ctx.patch_form.hide()
        self.ctx.scroll_to_top()
        logger.debug("Editing product %s", product_id)

    def close_replace_form(self) -> None:
        self.ctx.replace_form.hide()

    def open_patch_form(self, product_id) -> None:
        form = self.ctx.patch_form
        form.reset()
        form["id"] = product_id
        form.show()
        self.ctx.replace_form.hide()
        self.ctx.scroll_to_top()
        logger.debug("Patching product %s", product_id)

    def close_patch_form(self) -> None:
        self.ctx.patch_form.hide()

    def edit_row(self, product_id) -> bool:
        product = self.ctx.container.find(product_id)
        if product is None:
            logger.warning("Product %s is not in the rendered catalog", product_id)
            return False
        self.open_replace_form(product.id, product.name, product.price, product.category)
        return True
