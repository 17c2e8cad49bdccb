from dataclasses import dataclass
from typing import Iterable, Tuple

from chatlog.core.exceptions import InvalidSubjectName

MAX_NAME_BYTES = 40
# ten or more candidates is too many to offer as a numbered choice
CHOOSABLE_LIMIT = 10


def validate_subject_name(name: str) -> str:
    """
    Subject names become directory names and cache records: they must be
    non-empty, at most 40 bytes and free of spaces.
    """
    if not name or len(name.encode()) > MAX_NAME_BYTES or " " in name:
        raise InvalidSubjectName(name)
    return name


@dataclass(frozen=True)
class MatchResult:
    exact: str | None = None
    candidates: Tuple[str, ...] = ()

    @property
    def matched(self) -> bool:
        return self.exact is not None

    @property
    def choosable(self) -> bool:
        return 0 < len(self.candidates) < CHOOSABLE_LIMIT

    @property
    def count(self) -> int:
        return len(self.candidates)

    def get(self, index: int) -> str:
        return self.candidates[index]

    def __iter__(self):
        return iter(self.candidates)


def match_subject(prefix: str, names: Iterable[str]) -> MatchResult:
    """
    Match a possibly partial subject name against the known subjects.

    An exact name wins as soon as it is seen. Every other name starting with
    the prefix is kept as a candidate, in the order given; a lone candidate is
    promoted to the match. The empty prefix matches every name.
    """
    candidates = []
    for name in names:
        if name == prefix:
            return MatchResult(exact=name)
        if name.startswith(prefix):
            candidates.append(name)

    if len(candidates) == 1:
        return MatchResult(exact=candidates[0], candidates=tuple(candidates))
    return MatchResult(candidates=tuple(candidates))
