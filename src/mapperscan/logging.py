"""Logging setup for the command line entry point."""

import logging


def configure_logging(verbose: bool = False, force: bool = False) -> None:
    """Initialise the root logger.

    The library itself never installs handlers; only entry points call this.
    Pass ``force=True`` to reconfigure during tests.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
