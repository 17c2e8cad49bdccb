"""
The recently used subject, kept between runs in a single fixed-width record.

The record is exactly 40 bytes: the UTF-8 name, left-justified and padded
with spaces. A name longer than that is cut at the last whole character that
fits, so the file on disk is always a full record. Trailing spaces can't be
told apart from padding and are lost on the way back.
"""
import logging

from pathlib import Path

from chatlog.core.exceptions import CacheReadIncomplete, CacheWriteFailed
from chatlog.core.outcome import Outcome

logger = logging.getLogger(__name__)

RECORD_SIZE = 40
NO_SUBJECT = "NONE"


def encode_record(name: str) -> bytes:
    raw = name.encode()
    if len(raw) > RECORD_SIZE:
        raw = raw[:RECORD_SIZE].decode(errors="ignore").encode()
    return raw.ljust(RECORD_SIZE, b" ")


def decode_record(data: bytes) -> str:
    if len(data) < RECORD_SIZE:
        raise CacheReadIncomplete(len(data))
    return data[:RECORD_SIZE].rstrip(b" ").decode(errors="replace")


class RecentSubjectStore:

    def __init__(self, path: Path):
        self.path = path

    @classmethod
    def locate(cls, appname: str, home: str | None, working_dir: Path) -> Path:
        """
        ~/.cache/<appname> when ~/.cache exists, otherwise a .<appname>
        dotfile in the working directory.
        """
        if home:
            cache_dir = Path(home) / ".cache"
            if cache_dir.is_dir():
                return cache_dir / appname
        return working_dir / f".{appname}"

    def get(self) -> str:
        """
        Returns the last subject written, or "NONE" if there is no complete
        record to read.
        """
        try:
            with open(self.path, "rb") as f:
                data = f.read(RECORD_SIZE)
        except OSError as e:
            logger.debug("no cache at %s: %s", self.path, e)
            return NO_SUBJECT

        try:
            return decode_record(data)
        except CacheReadIncomplete as e:
            logger.debug("ignoring cache at %s: %s", self.path, e)
            return NO_SUBJECT

    def set(self, name: str, outcome: Outcome | None = None) -> str:
        """
        Record `name` as the most recent subject and hand it back unchanged,
        whether or not the write worked.
        """
        outcome = outcome if outcome is not None else Outcome()
        if len(name.encode()) > RECORD_SIZE:
            outcome.warn("name is too long")

        try:
            self.path.write_bytes(encode_record(name))
        except OSError as e:
            outcome.record(CacheWriteFailed(self.path, e.strerror or str(e)))
        return name
