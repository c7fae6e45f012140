# utils.py
# Small shared helpers for the app layer.

from geopair_app.setup_imports import *

LOG = logging.getLogger(__name__)


def log_error_and_continue(context: str, exc: Exception | None = None):
    """
    Logs an error with optional exception details, keeping callsites consistent.
    """
    if exc is not None:
        LOG.error(f"❌ {context}: {exc}")
    else:
        LOG.error(f"❌ {context}")


def configure_logging(level: str = "INFO"):
    """
    Configure root logging once for a CLI run. Unknown level names fall back to INFO.
    """
    numeric = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    logging.getLogger().setLevel(numeric)
