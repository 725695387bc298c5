from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional

from catalog_ui.schemas import Product, as_text


@dataclass
class CatalogContainer:
    html: str = ""
    products: List[Product] = field(default_factory=list)

    def replace(self, html: str, products: Optional[List[Product]] = None) -> None:
        self.html = html
        self.products = list(products or [])

    def find(self, product_id) -> Optional[Product]:
        for product in self.products:
            if str(product.id) == str(product_id):
                return product
        return None


@dataclass
class StatusElement:
    text: str = ""
    color: str = ""


class SubmitEvent:
    def __init__(self, form: "Form"):
        self.form = form
        self.default_prevented = False

    def prevent_default(self) -> None:
        self.default_prevented = True


SubmitHandler = Callable[[SubmitEvent], Awaitable[object]]


class Form:
    """A named group of string inputs with a visibility flag."""

    def __init__(self, name: str, fields: List[str], visible: bool = True):
        self.name = name
        self.fields: Dict[str, str] = {key: "" for key in fields}
        self.visible = visible
        self._handler: Optional[SubmitHandler] = None

    def __getitem__(self, key: str) -> str:
        return self.fields[key]

    def __setitem__(self, key: str, value) -> None:
        if key not in self.fields:
            raise KeyError(f"{self.name} has no field {key!r}")
        self.fields[key] = as_text(value)

    def fill(self, **values) -> None:
        for key, value in values.items():
            self[key] = value

    def reset(self) -> None:
        for key in self.fields:
            self.fields[key] = ""

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def on_submit(self, handler: SubmitHandler) -> None:
        self._handler = handler

    async def submit(self):
        if self._handler is None:
            raise RuntimeError(f"{self.name} has no submit handler")
        return await self._handler(SubmitEvent(self))


@dataclass
class UIContext:
    container: CatalogContainer = field(default_factory=CatalogContainer)
    status: StatusElement = field(default_factory=StatusElement)
    add_form: Form = field(
        default_factory=lambda: Form("add-form", ["name", "price", "category"])
    )
    replace_form: Form = field(
        default_factory=lambda: Form("update-form", ["id", "name", "price", "category"])
    )
    patch_form: Form = field(
        default_factory=lambda: Form(
            "patch-form", ["id", "name", "price", "category", "image_url"]
        )
    )
    scroll_y: int = 0

    def scroll_to_top(self) -> None:
        self.scroll_y = 0
