import logging

from . import settings

_configured = False


def configure_logging(level=None):
    """Set up root logging once per process; Streamlit reruns call this on every page load."""
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _configured = True
