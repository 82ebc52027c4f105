from __future__ import annotations

from typing import Optional

from linmath.vectors.base import VectorBase, component, swizzle
from linmath.vectors.vector3 import Vector3


class Vector2(VectorBase):
    """2-component float32 vector (x, y)."""
    __slots__ = ()

    SIZE = 2

    x = component(0, "x")
    y = component(1, "y")
    xy = swizzle(2, "x and y")

    @classmethod
    def up(cls) -> "Vector2":
        return cls(0.0, 1.0)

    @classmethod
    def down(cls) -> "Vector2":
        return cls(0.0, -1.0)

    @classmethod
    def right(cls) -> "Vector2":
        return cls(1.0, 0.0)

    @classmethod
    def left(cls) -> "Vector2":
        return cls(-1.0, 0.0)

    @classmethod
    def cross(cls, vector: "Vector2", vector2: "Vector2", dest: Optional[Vector3] = None) -> Vector3:
        """
        Cross product of two planar vectors, embedded in 3-space.

        Returns
        -------
        Vector3
            ``(0, 0, x * y2 - y * x2)``, written into `dest` or a new `Vector3`.
        """
        if dest is None:
            dest = Vector3()
        x, y = vector.x, vector.y
        x2, y2 = vector2.x, vector2.y
        dest.xyz = [0.0, 0.0, x * y2 - y * x2]
        return dest
