import pytest

from catalog_ui.context import Form, UIContext
from catalog_ui.forms import FormController
from catalog_ui.schemas import Product


@pytest.fixture
def ctx():
    return UIContext()


@pytest.fixture
def forms(ctx):
    return FormController(ctx)


def test_open_replace_form_fills_and_shows(ctx, forms):
    ctx.scroll_y = 800
    forms.open_replace_form(5, "Widget", 9.99, None)

    assert ctx.replace_form.fields == {
        "id": "5",
        "name": "Widget",
        "price": "9.99",
        "category": "",
    }
    assert ctx.replace_form.visible
    assert ctx.scroll_y == 0


def test_opening_patch_form_hides_replace_form(ctx, forms):
    forms.open_replace_form(5, "Widget", 9.99, "Tools")
    forms.open_patch_form(5)

    assert ctx.patch_form.visible
    assert not ctx.replace_form.visible


def test_opening_replace_form_hides_patch_form(ctx, forms):
    forms.open_patch_form(5)
    forms.open_replace_form(5, "Widget", 9.99, "Tools")

    assert ctx.replace_form.visible
    assert not ctx.patch_form.visible


def test_open_patch_form_clears_previous_inputs(ctx, forms):
    forms.open_patch_form(1)
    ctx.patch_form.fill(name="Old", price="1", category="X", image_url="http://img")

    forms.open_patch_form(2)

    assert ctx.patch_form.fields == {
        "id": "2",
        "name": "",
        "price": "",
        "category": "",
        "image_url": "",
    }


def test_close_replace_form_keeps_values(ctx, forms):
    forms.open_replace_form(5, "Widget", 9.99, "Tools")
    forms.close_replace_form()

    assert not ctx.replace_form.visible
    assert ctx.replace_form["name"] == "Widget"


def test_close_patch_form(ctx, forms):
    forms.open_patch_form(5)
    forms.close_patch_form()

    assert not ctx.patch_form.visible


def test_edit_row_uses_last_rendered_product(ctx, forms):
    ctx.container.replace(
        "<table></table>",
        [Product(id=3, name="Bob's Thing", price=3.5, category="Misc")],
    )

    assert forms.edit_row("3")
    assert ctx.replace_form.fields == {
        "id": "3",
        "name": "Bob's Thing",
        "price": "3.5",
        "category": "Misc",
    }


def test_edit_row_ignores_unknown_id(ctx, forms):
    assert not forms.edit_row(99)
    assert not ctx.replace_form.visible


def test_form_rejects_unknown_field():
    form = Form("add-form", ["name"])

    with pytest.raises(KeyError):
        form["price"] = "1"


@pytest.mark.asyncio
async def test_submit_without_handler_raises():
    with pytest.raises(RuntimeError):
        await Form("add-form", ["name"]).submit()


def test_open_replace_form_shows_whole_number_price_without_fraction(ctx, forms):
    forms.open_replace_form(5, "Widget", 10.0, "Tools")

    assert ctx.replace_form["price"] == "10"
