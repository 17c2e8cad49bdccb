import logging

from dataclasses import dataclass, field
from typing import List

from chatlog.core.exceptions import ChatlogError

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """
    Warnings collected over one invocation.

    Operations append to this instead of aborting, so one run can report
    several problems and still finish the work that is left.
    """
    warnings: List[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        logger.debug("warning: %s", message)
        self.warnings.append(message)

    def record(self, error: ChatlogError) -> None:
        self.warn(str(error))

    @property
    def ok(self) -> bool:
        return not self.warnings

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1
