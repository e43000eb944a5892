from __future__ import annotations


class SceneError(ValueError):
    """Raised when a scene or one of its values cannot be rendered."""
