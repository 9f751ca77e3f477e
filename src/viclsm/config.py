"""Model options shared by the viclsm kernels.

``ModelOptions`` is created once during model initialization and passed
by value to anything that needs it. It is frozen so concurrent workers
can share one instance without coordination.

TOML layout::

    [options]
    FROZEN_SOIL = true

    [logging]
    level = "DEBUG"
    format = "json"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

import toml

from viclsm.logging import configure_logging, get_logger

__all__ = ["ModelOptions"]

log = get_logger("config")

_TRUE_STRINGS = {"TRUE", "T", "YES", "ON", "1"}
_FALSE_STRINGS = {"FALSE", "F", "NO", "OFF", "0"}
_LOG_FORMATS = ("console", "json")


def _to_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        upper = value.strip().upper()
        if upper in _TRUE_STRINGS:
            return True
        if upper in _FALSE_STRINGS:
            return False
    raise ValueError(f"Option {key} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class ModelOptions:
    """Immutable run options.

    Attributes
    ----------
    frozen_soil : bool
        Enable frozen soil physics (FROZEN_SOIL)
    log_level : str
        Level passed to ``configure_logging``
    log_format : str
        "console" or "json"
    """

    frozen_soil: bool = False
    log_level: str = "INFO"
    log_format: str = "console"

    def __post_init__(self):
        if not isinstance(self.frozen_soil, bool):
            raise ValueError(f"frozen_soil must be a boolean, got {self.frozen_soil!r}")
        if self.log_format not in _LOG_FORMATS:
            raise ValueError(f"log_format must be one of {_LOG_FORMATS}, got {self.log_format!r}")

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ModelOptions":
        """Build options from a parsed TOML mapping.

        Option keys are matched case-insensitively, so both ``FROZEN_SOIL``
        and ``frozen_soil`` are accepted. A flat mapping without an
        ``[options]`` table is read as the options table itself.
        """
        opts_conf = raw.get("options", raw)
        log_conf = raw.get("logging", {})

        opts = {str(k).lower(): v for k, v in opts_conf.items()}

        kwargs = {}
        if "frozen_soil" in opts:
            kwargs["frozen_soil"] = _to_bool("FROZEN_SOIL", opts["frozen_soil"])
        if "level" in log_conf:
            kwargs["log_level"] = str(log_conf["level"]).upper()
        if "format" in log_conf:
            kwargs["log_format"] = str(log_conf["format"]).lower()

        return cls(**kwargs)

    @classmethod
    def from_toml(cls, conf_file_path) -> "ModelOptions":
        """Read options from a TOML file."""
        conf_file_path = os.path.expanduser(conf_file_path)
        with open(conf_file_path, "r") as f:
            raw_config = toml.load(f)

        options = cls.from_dict(raw_config)
        log.info("options_loaded", path=str(conf_file_path), frozen_soil=options.frozen_soil)
        return options

    def with_frozen_soil(self, enabled: bool) -> "ModelOptions":
        """Return a copy with FROZEN_SOIL set to ``enabled``."""
        return replace(self, frozen_soil=_to_bool("FROZEN_SOIL", enabled))

    def configure_logging(self, output: str = "stderr") -> None:
        configure_logging(level=self.log_level, format=self.log_format, output=output)
