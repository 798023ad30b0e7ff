import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "botsniff-rich"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Route botsniff logs through rich on stderr so stdout stays clean for JSON."""
    logger = logging.getLogger("botsniff")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
