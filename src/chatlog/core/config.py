from __future__ import annotations

import os
import tomllib
import pendulum

from dataclasses import dataclass, field
from pathlib import Path

from chatlog.core.exceptions import ConfigError

APPNAME = "chatlog"

@dataclass
class Config:
    """Configuration for chatlog. This object includes the default values for the CLI."""
    appname: str = APPNAME
    datadir: str = "subjects"
    editor: str = field(default_factory=lambda: os.getenv("EDITOR", "vim"))
    timezone: pendulum.Timezone = field(default_factory=lambda: pendulum.now().timezone)

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        config = cls()
        if "appname" in data:
            config.appname = str(data["appname"])
        if "datadir" in data:
            config.datadir = str(data["datadir"])
        if "editor" in data:
            config.editor = str(data["editor"])
        if "timezone" in data:
            config.timezone = pendulum.timezone(data["timezone"])
        return config

    @staticmethod
    def default_path() -> Path:
        """
        Where the config file lives: $XDG_CONFIG_HOME/chatlog/config.toml,
        falling back to ~/.config/chatlog/config.toml.
        """
        config_home = os.getenv("XDG_CONFIG_HOME")
        if config_home:
            return Path(config_home) / APPNAME / "config.toml"
        home = os.getenv("HOME")
        return Path(home or ".") / ".config" / APPNAME / "config.toml"

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """
        Read the config file, returning the defaults if there isn't one.
        """
        path = path or cls.default_path()
        if not path.is_file():
            return cls()
        # unknown timezones surface as KeyError or ValueError depending on the pendulum release
        try:
            return cls.from_dict(tomllib.loads(path.read_text()))
        except (tomllib.TOMLDecodeError, KeyError, ValueError, OSError) as e:
            raise ConfigError(path, str(e))
