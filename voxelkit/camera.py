"""A free-flying perspective camera and a 2D pixel canvas.

Matrices are 4x4 numpy arrays in mathematical (row-major) convention, so
a point p is transformed as ``matrix @ p``.
"""

from __future__ import annotations

import math

import numpy as np

from voxelkit.viewport import Viewport

__all__ = ["Camera", "Canvas"]

_PITCH_LIMIT = 89.99
_NEAR = 0.01
_FAR = 1500.0


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3], m[0, 3] = s, -np.dot(s, eye)
    m[1, :3], m[1, 3] = u, -np.dot(u, eye)
    m[2, :3], m[2, 3] = -f, np.dot(f, eye)
    return m


def _perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    tan_half = math.tan(fovy / 2)
    m = np.zeros((4, 4))
    m[0, 0] = 1 / (aspect * tan_half)
    m[1, 1] = 1 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def _ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    m = np.identity(4)
    m[0, 0] = 2 / (right - left)
    m[1, 1] = 2 / (top - bottom)
    m[2, 2] = -2 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m


class Camera:
    """Position plus yaw/pitch orientation; yaw 270 looks down -Z."""

    def __init__(self, viewport: Viewport) -> None:
        self.viewport = viewport
        self.position = np.zeros(3)
        self.absolute_up = np.array([0.0, 1.0, 0.0])
        self.fov = 45.0
        self.horizontal_rot = 270.0
        self.vertical_rot = 0.0
        self._update_vectors()

    def _update_vectors(self) -> None:
        yaw = math.radians(self.horizontal_rot)
        pitch = math.radians(self.vertical_rot)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = _normalize(front)
        self.right = _normalize(np.cross(self.front, self.absolute_up))
        self.up = _normalize(np.cross(self.right, self.front))

    def rotate(self, x: float, y: float, z: float) -> None:
        """Turn by x degrees of yaw and y degrees of pitch; z is ignored."""
        self.horizontal_rot -= x
        self.vertical_rot = min(max(self.vertical_rot + y, -_PITCH_LIMIT), _PITCH_LIMIT)
        self._update_vectors()

    def move(self, x: float, y: float, z: float) -> None:
        """Strafe by x, rise by y and move backwards along the view by z."""
        self.position = (
            self.position
            - self.front * z
            + self.right * x
            + np.array([0.0, y, 0.0])
        )
        self._update_vectors()

    def view(self) -> np.ndarray:
        return _look_at(self.position, self.position + self.front, self.up)

    def view_from_null(self) -> np.ndarray:
        """View from one unit behind the origin, looking at it."""
        return _look_at(-self.front, np.zeros(3), np.array([0.0, 1.0, 0.0]))

    def projection(self) -> np.ndarray:
        aspect = float(self.viewport.width) / float(self.viewport.height)
        return _perspective(math.radians(self.fov), aspect, _NEAR, _FAR)

    def orthographic_projection(self) -> np.ndarray:
        ratio = self.viewport.ratio()
        return _ortho(-1.0, 1.0, -1.0 / ratio, 1.0 / ratio, -1.0, 1.0)


class Canvas:
    """Pixel space with the origin at the top-left corner."""

    def __init__(self, viewport: Viewport) -> None:
        self.viewport = viewport

    def projection(self) -> np.ndarray:
        return _ortho(
            0.0, float(self.viewport.width), float(self.viewport.height), 0.0, -1.0, 1.0
        )