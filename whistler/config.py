"""Configuration handling for whistler"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from whistler.constants import DEFAULT_REMOTE, GIT_DIRECTORY, GRADLE_FILE

ENV_PREFIX = "WHISTLER_"


@dataclass
class Config:
    """Configuration for whistler with validation."""

    # Discovery
    root_directory: str = field(default_factory=lambda: os.path.expanduser("~"))
    max_depth: int = 2
    build_markers: List[str] = field(default_factory=lambda: [GRADLE_FILE])
    vcs_marker: str = GIT_DIRECTORY

    # Git
    remote_name: str = DEFAULT_REMOTE

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8080

    # Output
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_max_depth()
        self._validate_remote_name()
        self._validate_markers()
        self._validate_port()

    def _validate_max_depth(self):
        """Validate max_depth is at least 1."""
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")
        self.remote_name = self.remote_name.strip()

    def _validate_markers(self):
        if not isinstance(self.build_markers, list):
            raise ValueError("build_markers must be a list")
        if not self.vcs_marker:
            raise ValueError("vcs_marker cannot be empty")

    def _validate_port(self):
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "root_directory": self.root_directory,
            "max_depth": self.max_depth,
            "build_markers": self.build_markers,
            "vcs_marker": self.vcs_marker,
            "remote_name": self.remote_name,
            "host": self.host,
            "port": self.port,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key, so services accept a Config or a plain dict."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "root_directory",
            "max_depth",
            "build_markers",
            "vcs_marker",
            "remote_name",
            "host",
            "port",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None, **overrides) -> "Config":
        """Create Config from WHISTLER_* environment variables.

        Explicit keyword overrides win over the environment.
        """
        environ = os.environ if environ is None else environ
        values = {}

        root_directory = environ.get(f"{ENV_PREFIX}ROOT_DIRECTORY")
        if root_directory:
            values["root_directory"] = os.path.expanduser(root_directory)
        if environ.get(f"{ENV_PREFIX}MAX_DEPTH"):
            values["max_depth"] = _parse_int(environ, f"{ENV_PREFIX}MAX_DEPTH")
        if environ.get(f"{ENV_PREFIX}REMOTE"):
            values["remote_name"] = environ[f"{ENV_PREFIX}REMOTE"]
        if environ.get(f"{ENV_PREFIX}HOST"):
            values["host"] = environ[f"{ENV_PREFIX}HOST"]
        if environ.get(f"{ENV_PREFIX}PORT"):
            values["port"] = _parse_int(environ, f"{ENV_PREFIX}PORT")

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_dict(values)


def _parse_int(environ, key: str) -> int:
    try:
        return int(environ[key])
    except ValueError:
        raise ValueError(f"{key} must be an integer, got '{environ[key]}'")
