import logging
import os

# -------------------------------
# Backend
# -------------------------------
API_BASE = os.getenv("CATALOG_API_BASE", "http://localhost:8080").rstrip("/")
PRODUCTS_PATH = os.getenv("CATALOG_PRODUCTS_PATH", "/products")

# -------------------------------
# UI behaviour
# -------------------------------
STATUS_CLEAR_DELAY = float(os.getenv("CATALOG_STATUS_CLEAR_DELAY", "2.5"))

# -------------------------------
# Logging
# -------------------------------
LOG_LEVEL = os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
