"""alphaquiz: a terminal multiple-choice quiz with partial credit for hedged guesses."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
