from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class Product(BaseModel):
    """A catalog row as the server sent it. Off-shape values are kept for display."""

    model_config = ConfigDict(populate_by_name=True)

    id: Any = None
    name: Any = None
    price: Any = None
    category: Any = None
    image_url: Any = Field(default=None, alias="imageUrl")


def as_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# Payloads carry the raw input strings; the server does the validation.

class ProductCreate(BaseModel):
    name: str
    price: str
    category: str = ""


class ProductReplace(ProductCreate):
    id: str


class ProductPatch(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    price: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    @classmethod
    def from_inputs(cls, **inputs: str) -> "ProductPatch":
        # empty inputs are left out so the server keeps the stored value
        return cls(**{key: value for key, value in inputs.items() if value})

    def payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)
