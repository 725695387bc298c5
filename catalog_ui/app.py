from html import escape

import streamlit as st

from catalog_ui.config import configure_logging
from catalog_ui.renderer import COLUMNS, row_cells
from catalog_ui.runtime import EventLoopThread
from catalog_ui.session import CatalogSession

st.set_page_config(
    page_title="Product Catalog",
    layout="wide"
)


@st.cache_resource
def get_runtime() -> EventLoopThread:
    configure_logging()
    return EventLoopThread()


runtime = get_runtime()

if "catalog" not in st.session_state:
    session = CatalogSession(loop=runtime.loop)
    runtime.run(session.load())
    st.session_state.catalog = session
    st.session_state.sync_forms = [
        session.ctx.add_form.name,
        session.ctx.replace_form.name,
        session.ctx.patch_form.name,
    ]

session = st.session_state.catalog
ctx = session.ctx


def widget_key(form, field):
    return f"{form.name}-{field}"


# Push form state into the widgets of the forms the last action changed;
# widget values can only be assigned before the widgets exist in a run.
for form in (ctx.add_form, ctx.replace_form, ctx.patch_form):
    if form.name in st.session_state.get("sync_forms", []):
        for field, value in form.fields.items():
            st.session_state[widget_key(form, field)] = value
st.session_state.sync_forms = []


def act(coro, *forms):
    runtime.run(coro)
    st.session_state.sync_forms = [form.name for form in forms]
    st.rerun()


def submit(form, labels):
    for field in labels:
        form[field] = st.session_state[widget_key(form, field)]
    act(form.submit(), form)


st.header("🛒 Product Catalog")
st.caption("List, add, edit and remove products")


# ---------------- Status ----------------
@st.fragment(run_every=1)
def status_box():
    if ctx.status.text:
        st.markdown(
            f'<div id="message" style="color:{ctx.status.color}">'
            f"{escape(ctx.status.text)}</div>",
            unsafe_allow_html=True
        )


status_box()

# ---------------- Update Product ----------------
if ctx.replace_form.visible:
    st.subheader("✏️ Update Product")
    labels = {"id": "ID", "name": "Name", "price": "Price", "category": "Category"}
    with st.form(ctx.replace_form.name):
        for field, label in labels.items():
            st.text_input(label, key=widget_key(ctx.replace_form, field), disabled=field == "id")
        col1, col2 = st.columns(2)
        update = col1.form_submit_button("Update")
        cancel = col2.form_submit_button("Cancel")

    if update:
        submit(ctx.replace_form, labels)
    if cancel:
        session.forms.close_replace_form()
        st.rerun()

# ---------------- Patch Product ----------------
if ctx.patch_form.visible:
    st.subheader("🩹 Patch Product")
    st.caption("Only filled fields are sent")
    labels = {
        "id": "ID",
        "name": "Name",
        "price": "Price",
        "category": "Category",
        "image_url": "Image URL",
    }
    with st.form(ctx.patch_form.name):
        for field, label in labels.items():
            st.text_input(label, key=widget_key(ctx.patch_form, field), disabled=field == "id")
        col1, col2 = st.columns(2)
        patch = col1.form_submit_button("Patch")
        cancel = col2.form_submit_button("Cancel")

    if patch:
        submit(ctx.patch_form, labels)
    if cancel:
        session.forms.close_patch_form()
        st.rerun()

# ---------------- Add Product ----------------
st.subheader("➕ Add New Product")

labels = {"name": "Product Name", "price": "Price", "category": "Category"}
with st.form(ctx.add_form.name):
    for field, label in labels.items():
        st.text_input(label, key=widget_key(ctx.add_form, field))
    submitted = st.form_submit_button("Add Product")

if submitted:
    submit(ctx.add_form, labels)

# ---------------- Product Table ----------------
st.divider()
st.subheader("📋 Product List")

if not ctx.container.products:
    st.markdown(ctx.container.html, unsafe_allow_html=True)
else:
    widths = [1, 3, 1, 2, 1, 1, 1]
    for col, title in zip(st.columns(widths), COLUMNS):
        col.markdown(f"**{title}**")

    for i, product in enumerate(ctx.container.products):
        cols = st.columns(widths)
        for col, cell in zip(cols, row_cells(product)):
            col.text(cell)
        if cols[4].button("Edit", key=f"edit-{i}-{product.id}"):
            act(session.row_action("edit", product.id), ctx.replace_form)
        if cols[5].button("Patch", key=f"patch-{i}-{product.id}"):
            act(session.row_action("patch", product.id), ctx.patch_form)
        if cols[6].button("Delete", key=f"delete-{i}-{product.id}"):
            act(session.row_action("delete", product.id))

if st.button("Refresh"):
    act(session.renderer.refresh())
