"""State models, caches, UI state and player-event hooks for a terminal music player client."""

__version__ = "0.1.0"

__all__ = ["data", "hooks", "model", "page", "player", "popup", "ui", "utils"]