import logging
import os

from pathlib import Path
from typing import List, Tuple

from chatlog.core.dates import YMD_PATTERN
from chatlog.core.exceptions import NoMatchingSubject, SubjectAlreadyExists, SubjectCreateFailed
from chatlog.core.subjects import validate_subject_name

logger = logging.getLogger(__name__)


class FileSystem:
    """
    Layout of the subject store:

        <base>/<datadir>/<subject>/<YYYYMMDD>

    Anything else inside a subject directory is kept but not treated as a
    dated entry, and dotfiles are ignored.
    """

    def __init__(self, base_dir: Path, datadir: str = "subjects"):
        self.BASE_DIR = base_dir
        self.SUBJECT_PATH = base_dir / datadir

    @staticmethod
    def default_base_dir() -> Path:
        """
        $CHATLOG_HOME, else $HOME, else the current directory.
        """
        home = os.getenv("CHATLOG_HOME") or os.getenv("HOME")
        return Path(home) if home else Path(".")

    def subject_path(self, subject: str) -> Path:
        return self.SUBJECT_PATH / subject

    def entry_path(self, subject: str, date: str) -> Path:
        """
        Returns the path to the entry file for the given subject and date.
        """
        return self.SUBJECT_PATH / subject / str(date)

    def subjects(self) -> List[str]:
        """
        Names of every subject directory, sorted so that numbered choices come
        out the same way on every run.
        """
        if not self.SUBJECT_PATH.is_dir():
            logger.debug("subject store %s does not exist", self.SUBJECT_PATH)
            return []
        names = sorted(
            entry.name
            for entry in os.scandir(self.SUBJECT_PATH)
            if entry.is_dir() and not entry.name.startswith(".")
        )
        logger.debug("found %d subjects under %s", len(names), self.SUBJECT_PATH)
        return names

    def read_dates(self, subject: str) -> Tuple[List[str], List[str]]:
        """
        Split a subject's entries into dated entries, sorted ascending, and
        everything else in directory order.
        """
        path = self.subject_path(subject)
        if not path.is_dir():
            raise NoMatchingSubject(subject)

        dates = []
        others = []
        for entry in os.scandir(path):
            if YMD_PATTERN.fullmatch(entry.name):
                dates.append(entry.name)
            elif not entry.name.startswith("."):
                others.append(entry.name)
        dates.sort()
        return dates, others

    def latest_date(self, subject: str) -> str | None:
        dates, _ = self.read_dates(subject)
        return dates[-1] if dates else None

    def create_subject(self, name: str) -> Path:
        validate_subject_name(name)
        path = self.subject_path(name)
        if path.exists():
            raise SubjectAlreadyExists(name)
        try:
            self.SUBJECT_PATH.mkdir(parents=True, exist_ok=True)
            path.mkdir()
        except OSError as e:
            raise SubjectCreateFailed(name, e.strerror or str(e))
        return path
