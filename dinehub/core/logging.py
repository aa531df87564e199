import logging
from dinehub.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def configure_logging(level: str = None) -> None:
    """Configure root logging once; uvicorn keeps its own handlers."""
    level_name = (level or settings.LOG_LEVEL).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level_name, format=LOG_FORMAT)
    else:
        root.setLevel(level_name)
    logging.getLogger("dinehub").setLevel(level_name)
