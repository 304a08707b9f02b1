# brainvision/io/options.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from brainvision.core import InvalidSelection
from brainvision.utils.config_loader import load_config


@dataclass(frozen=True, slots=True)
class ReadOptions:
    """
    Post-decode selection applied by `read_brainvision`.

    - start_sample / end_sample: 1-based, inclusive (None = recording edge)
    - channels: 0-based indices and/or labels (None = all, file order)
    """
    start_sample: int | None = None
    end_sample: int | None = None
    channels: tuple[int | str, ...] | None = None

    def __post_init__(self) -> None:
        if self.channels is not None:
            if isinstance(self.channels, (str, int)):
                object.__setattr__(self, "channels", (self.channels,))
            else:
                object.__setattr__(self, "channels", tuple(self.channels))
        for name in ("start_sample", "end_sample"):
            v = getattr(self, name)
            if v is not None and (isinstance(v, bool) or not isinstance(v, int)):
                raise InvalidSelection(f"ReadOptions.{name} must be an integer or None.")

    @property
    def is_full_read(self) -> bool:
        return self.start_sample is None and self.end_sample is None and self.channels is None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ReadOptions":
        """Build from a mapping; a nested `read` section takes precedence."""
        section = data.get("read", data)
        if not isinstance(section, Mapping):
            raise InvalidSelection("The 'read' section must be a mapping.")
        return cls(
            start_sample=section.get("start_sample"),
            end_sample=section.get("end_sample"),
            channels=section.get("channels"),
        )

    @classmethod
    def from_config(cls, path: str | Path) -> "ReadOptions":
        """Load options from a YAML/JSON file."""
        return cls.from_mapping(load_config(path))
