# catalog/utils/logging.py
import logging

from catalog.utils.settings import LOG_LEVEL

_ROOT = "catalog"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(_ROOT)
    # create_app moze byc wolane wiele razy (testy), handler tylko raz
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        root.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))
    return root


def get_logger(name: str) -> logging.Logger:
    _configure_root()
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
