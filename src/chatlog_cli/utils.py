import datetime
import logging
import subprocess

import humanize
import pendulum

from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def open_in_editor(path: Path, editor: str) -> subprocess.Popen:
    """
    Start the editor on `path` and return straight away. The editor is left
    running on its own; its exit status is never looked at.
    """
    logger.debug("launching %s %s", editor, path)
    return subprocess.Popen([editor, str(path)])


def entry_age(name: str, today: pendulum.Date) -> str | None:
    """
    How long ago a dated entry was, e.g. "3 days ago". None for names that
    aren't real calendar dates.
    """
    try:
        date = pendulum.from_format(name, "YYYYMMDD").date()
    except ValueError:
        return None
    days = today.toordinal() - date.toordinal()
    if days == 0:
        return "today"
    return humanize.naturaltime(datetime.timedelta(days=days))
