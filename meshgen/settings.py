"""
Generator settings: defaults for primitive shapes and logging.

Settings can be stored as JSON (see MeshSettings.load / MeshSettings.save).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Union

from meshgen import log


@dataclass
class MeshSettings:
    """
    Defaults used when shapes are created from settings.

    - icosphere_radius: radius of Icosphere.from_settings()
    - icosphere_subdivisions: subdivision level of Icosphere.from_settings()
    - cube_size: edge length of Cube.from_settings()
    - log_level: level applied to the "meshgen" logger by apply()
    """

    icosphere_radius: float = 1.0
    icosphere_subdivisions: int = 5
    cube_size: float = 1.0
    log_level: str = "WARNING"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "MeshSettings":
        """Deserialize from dictionary."""
        return MeshSettings(
            icosphere_radius=float(data.get("icosphere_radius", 1.0)),
            icosphere_subdivisions=int(data.get("icosphere_subdivisions", 5)),
            cube_size=float(data.get("cube_size", 1.0)),
            log_level=str(data.get("log_level", "WARNING")),
        )

    def apply(self) -> None:
        """Apply log level to the meshgen logger."""
        log.set_level(self.log_level)

    @staticmethod
    def load(path: Union[str, Path]) -> "MeshSettings":
        """Load settings from JSON file. Falls back to defaults if the file is missing or broken."""
        path = Path(path)
        if not path.exists():
            return MeshSettings()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            settings = MeshSettings.from_dict(data)
            log.info(f"[MeshSettings] Loaded from {path}")
            return settings
        except (OSError, ValueError, TypeError, AttributeError) as e:
            log.error(e, "[MeshSettings] Failed to load settings")
            return MeshSettings()

    def save(self, path: Union[str, Path]) -> bool:
        """Save settings to JSON file."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            log.info(f"[MeshSettings] Saved to {path}")
            return True
        except OSError as e:
            log.error(e, "[MeshSettings] Failed to save settings")
            return False
