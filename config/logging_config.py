"""
Logging setup shared by all pages.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO"):
    """
    Configure root logging once per process.

    Streamlit re-executes page scripts on every interaction; basicConfig
    is a no-op after the first call so repeated calls are harmless.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
