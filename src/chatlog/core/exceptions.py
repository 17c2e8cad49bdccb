"""Errors raised by the chatlog engine.

Every one of these is reported to the user as a warning: the message goes to
stderr and the process exits with status 1. Whether the rest of the invocation
carries on is up to the caller.
"""

from pathlib import Path


class ChatlogError(Exception):
    """Base class for every chatlog failure."""


class ConfigError(ChatlogError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Invalid config file {path}: {reason}")


class InvalidSubjectName(ChatlogError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid name: {name!r}")


class SubjectAlreadyExists(ChatlogError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Subject {name} already exists")


class SubjectCreateFailed(ChatlogError):
    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Failed to create subject {name}: {reason}")


class NoMatchingSubject(ChatlogError):
    def __init__(self, prefix: str | None = None):
        self.prefix = prefix
        if prefix is None:
            super().__init__("No matching subject")
        else:
            super().__init__(f"No matching subject for {prefix!r}")


class AmbiguousNoSelection(ChatlogError):
    def __init__(self, message: str = "No input selected"):
        super().__init__(message)


class CacheReadIncomplete(ChatlogError):
    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Cache record is {size} bytes, expected a full record")


class CacheWriteFailed(ChatlogError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot write cache file {path}: {reason}")


class TargetNotRegularFile(ChatlogError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path} is not a regular file")
