"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)
