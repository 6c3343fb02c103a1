"""A drawable entity's transform and sprite-sheet frame selection."""

from __future__ import annotations

from typing import Hashable, Optional, Tuple

from .geometry import Vec2


class Sprite:
    """Position, rotation, scale and current sprite-sheet frame of an entity.

    Rotation is kept in degrees within ``[0, 360)``.
    """

    def __init__(
        self,
        position: Optional[Vec2] = None,
        *,
        texture: Hashable = None,
        frame_size: Optional[Tuple[float, float]] = None,
        scale: Optional[Vec2] = None,
        rotation: float = 0.0,
    ) -> None:
        self.position = position if position is not None else Vec2(0.0, 0.0)
        self.texture = texture
        self.scale = scale if scale is not None else Vec2(1.0, 1.0)
        self.frame_size = frame_size
        self.texture_rect: Optional[Tuple[int, int, int, int]] = None
        if frame_size is not None:
            self.set_frame(0, 0)
        self._rotation = 0.0
        self.rotation = rotation

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, angle: float) -> None:
        self._rotation = angle % 360.0

    @property
    def origin(self) -> Vec2:
        """Centre of the current frame, used as the rotation origin."""
        if self.frame_size is None:
            return Vec2(0.0, 0.0)
        width, height = self.frame_size
        return Vec2(width / 2.0, height / 2.0)

    def move(self, dx: float, dy: float) -> None:
        """Translate the sprite by ``(dx, dy)``."""
        self.position = self.position + Vec2(dx, dy)

    def rotate(self, angle: float) -> None:
        """Add ``angle`` degrees to the current rotation."""
        self.rotation = self._rotation + angle

    def set_frame(self, column: int, row: int) -> None:
        """Select the sprite-sheet cell at ``column``, ``row``."""
        if self.frame_size is None:
            raise ValueError("sprite has no frame size")
        width, height = self.frame_size
        self.texture_rect = (
            int(column * width),
            int(row * height),
            int(width),
            int(height),
        )

    def __repr__(self) -> str:
        return (
            f"Sprite(position={self.position!r}, rotation={self._rotation!r}, "
            f"texture={self.texture!r}, texture_rect={self.texture_rect!r})"
        )