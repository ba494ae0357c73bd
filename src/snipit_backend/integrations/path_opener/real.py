"""Real path opener using click.launch."""

import logging
import sys

import click

from snipit_backend.integrations.path_opener.abc import PathOpener

logger = logging.getLogger(__name__)


class RealPathOpener(PathOpener):
    """Production implementation delegating to click.launch.

    click.launch picks the platform handler (``start`` on Windows, ``open`` on
    macOS, ``xdg-open`` elsewhere). The handler is waited on so that its exit status
    decides the result and the child is reaped before the call returns.

    macOS is the exception: ``open -W`` blocks until the application that received
    the path quits, so there the launch is not waited on.
    """

    def open_path(self, path: str) -> bool:
        exit_code = click.launch(path, wait=sys.platform != "darwin")
        logger.debug("Opening %s returned %d", path, exit_code)
        return exit_code == 0
