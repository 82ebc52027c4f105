from __future__ import annotations

from linmath.vectors.base import VectorBase, component, swizzle


class Vector4(VectorBase):
    """4-component float32 vector (x, y, z, w)."""
    __slots__ = ()

    SIZE = 4

    x = component(0, "x")
    y = component(1, "y")
    z = component(2, "z")
    w = component(3, "w")
    xy = swizzle(2, "x and y")
    xyz = swizzle(3, "x, y and z")
    xyzw = swizzle(4, "x, y, z and w")
