"""Window geometry and appearance settings."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Viewport"]


@dataclass
class Viewport:
    """Size and appearance of the drawing surface."""

    name: str = "OpenGL Window"
    width: int = 800
    height: int = 600
    resizable: bool = True
    clear_color: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height