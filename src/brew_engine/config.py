"""Environment-variable-based configuration for the developer CLI."""

from __future__ import annotations

import os

LOG_LEVEL: str = os.environ.get("BREW_ENGINE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CURVE_POINTS: int = int(os.environ.get("BREW_ENGINE_CURVE_POINTS", "21"))
