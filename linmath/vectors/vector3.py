from __future__ import annotations

from typing import Optional

from linmath.vectors.base import VectorBase, component, swizzle


class Vector3(VectorBase):
    """
    3-component float32 vector (x, y, z).

    Axis constants follow a y-up, z-forward convention.
    """
    __slots__ = ()

    SIZE = 3

    x = component(0, "x")
    y = component(1, "y")
    z = component(2, "z")
    xy = swizzle(2, "x and y")
    xyz = swizzle(3, "x, y and z")

    @classmethod
    def up(cls) -> "Vector3":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def down(cls) -> "Vector3":
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def right(cls) -> "Vector3":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def left(cls) -> "Vector3":
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def forward(cls) -> "Vector3":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def backward(cls) -> "Vector3":
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def cross(cls, vector: "Vector3", vector2: "Vector3", dest: Optional["Vector3"] = None) -> "Vector3":
        dest = cls._target(dest)

        x, y, z = vector.xyz
        x2, y2, z2 = vector2.xyz

        dest.xyz = [
            y * z2 - z * y2,
            z * x2 - x * z2,
            x * y2 - y * x2,
        ]
        return dest
