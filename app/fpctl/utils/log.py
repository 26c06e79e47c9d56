"""Logging setup for the fpctl CLI.

Library modules only create loggers; handlers are attached here once,
from the CLI entry point, based on the -v count.
"""

import logging

from rich.logging import RichHandler

from fpctl.utils.formatting import err_console


def setup_logging(verbosity: int = 0) -> None:
    """Attach a stderr handler and set log levels.

    Args:
        verbosity: 0 shows warnings only, 1 enables fpctl debug output,
            2 or more enables debug output from every library.
    """
    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=verbosity > 1,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)

    root.setLevel(logging.DEBUG if verbosity > 1 else logging.WARNING)
    logging.getLogger("fpctl").setLevel(logging.DEBUG if verbosity > 0 else logging.WARNING)
