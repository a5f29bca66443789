"""
ShopSmart - Catalog Page

Browse grocery products by category and build a shopping list.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="ShopSmart",
    page_icon="🛒",
    layout="wide"
)

from config import configure_logging, get_settings
from views.catalog_view import CatalogView

configure_logging(get_settings().log_level)

view = CatalogView()
view.render()
