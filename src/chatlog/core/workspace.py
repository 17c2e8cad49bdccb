import logging
import os
import pendulum

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from chatlog.core.cache import NO_SUBJECT, RecentSubjectStore
from chatlog.core.config import Config
from chatlog.core.dates import DateArgument, date_string, resolve_date
from chatlog.core.exceptions import (AmbiguousNoSelection, ChatlogError, InvalidSubjectName,
                                     NoMatchingSubject, SubjectAlreadyExists,
                                     TargetNotRegularFile)
from chatlog.core.file_system import FileSystem
from chatlog.core.outcome import Outcome
from chatlog.core.subjects import MatchResult, match_subject

logger = logging.getLogger(__name__)


@dataclass
class Resolution:
    """
    What a list of arguments resolved to.

    `subject` and `path` are only set once there is a single subject to open.
    An ambiguous prefix leaves them empty with the candidates in `match`.
    """
    date: DateArgument
    prefix: str | None = None
    match: MatchResult | None = None
    subject: str | None = None
    path: Path | None = None
    remaining: List[str] = field(default_factory=list)
    outcome: Outcome = field(default_factory=Outcome)

    @property
    def needs_choice(self) -> bool:
        return self.subject is None and self.match is not None and self.match.choosable


class Workspace:

    def __init__(self,
                 config: Config | None = None,
                 base_dir: Path | None = None,
                 home: str | None = None,
                 working_dir: Path | None = None,
                 today: pendulum.Date | None = None):
        self.config = config or Config.load()
        self.fs = FileSystem(base_dir or FileSystem.default_base_dir(), self.config.datadir)
        cache_path = RecentSubjectStore.locate(self.config.appname,
                                               home if home is not None else os.getenv("HOME"),
                                               working_dir or Path.cwd())
        self.recent = RecentSubjectStore(cache_path)
        # "today" is fixed for the whole run
        self._today = today or pendulum.today(self.config.timezone).date()

    def today(self) -> pendulum.Date:
        return self._today

    def today_string(self) -> str:
        return date_string(self._today)

    def remember(self, subject: str, outcome: Outcome) -> str:
        return self.recent.set(subject, outcome)

    def resolve(self, tokens: List[str], use_recent: bool = True) -> Resolution:
        """
        Resolve `[DATE] [SUBJECT] ...` into a subject and entry path.

        A leading date expression is consumed first, then the next token is
        matched against the subject store. With no subject token the most
        recently used subject is taken, unless `use_recent` is off.
        """
        date, remaining = resolve_date(tokens, self.today())
        resolution = Resolution(date=date, remaining=remaining)

        if not remaining:
            if use_recent:
                recent = self.recent.get()
                if recent == NO_SUBJECT:
                    resolution.outcome.record(NoMatchingSubject())
                else:
                    self._settle(resolution, recent)
            return resolution

        resolution.prefix = remaining[0]
        resolution.remaining = remaining[1:]
        resolution.match = match_subject(resolution.prefix, self.fs.subjects())
        logger.debug("%r matched %s", resolution.prefix, resolution.match)

        if resolution.match.matched:
            self._settle(resolution, self.remember(resolution.match.exact, resolution.outcome))
        elif not resolution.match.choosable:
            resolution.outcome.record(NoMatchingSubject(resolution.prefix))
        return resolution

    def choose(self, resolution: Resolution, answer: str) -> str | None:
        """
        Settle an ambiguous resolution from a 1-based choice typed by the
        user. There is one attempt: anything that isn't a listed number is
        recorded as no selection.
        """
        answer = answer.strip()
        candidates = resolution.match.candidates if resolution.match else ()
        if answer.isdecimal() and 1 <= int(answer) <= len(candidates):
            subject = self.remember(candidates[int(answer) - 1], resolution.outcome)
            self._settle(resolution, subject)
            return subject
        resolution.outcome.record(AmbiguousNoSelection())
        return None

    def _settle(self, resolution: Resolution, subject: str) -> None:
        resolution.subject = subject
        resolution.path = self.fs.entry_path(subject, resolution.date.value)

    def completions(self, prefix: str) -> List[str]:
        return [name for name in self.fs.subjects() if name.startswith(prefix)]

    def create_subject(self, name: str, outcome: Outcome) -> Path | None:
        """
        Create a new subject directory. The name is remembered as the recent
        subject unless it was rejected outright.
        """
        try:
            path = self.fs.create_subject(name)
        except (InvalidSubjectName, SubjectAlreadyExists) as e:
            outcome.record(e)
            return None
        except ChatlogError as e:
            outcome.record(e)
            self.remember(name, outcome)
            return None
        self.remember(name, outcome)
        return path

    def latest_entry(self, subject: str) -> Path | None:
        latest = self.fs.latest_date(subject)
        if latest is None:
            return None
        return self.fs.entry_path(subject, latest)

    @staticmethod
    def target_action(path: Path) -> str:
        """
        "opening" for an existing file, "creating" for a missing one.
        Anything else in the way (a directory, say) is refused.
        """
        if path.is_file():
            return "opening"
        if not path.exists():
            return "creating"
        raise TargetNotRegularFile(path)
