"""Console logging for the branch-db CLI.

Library modules only create loggers; handlers are installed here, on
stderr, so stdout stays usable in shell scripts.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> RichHandler:
    """Attach a RichHandler to the branch_db logger.

    Parameters
    ----------
    verbose : bool
        Log at DEBUG instead of WARNING

    Returns
    -------
    RichHandler
        The installed handler
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("branch_db")
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
