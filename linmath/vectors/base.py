from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Iterator, List

import numpy as np

from linmath.utils.scalar import ScalarMath
from linmath.utils import linalg
from linmath.utils.types import Component, Float32Array, Threshold


def component(index: int, name: str) -> property:
    """Named read/write accessor for one buffer slot."""
    def fget(self) -> float:
        return float(self._values[index])

    def fset(self, value: float) -> None:
        self._values[index] = value

    return property(fget, fset, doc=f"The {name}-component of the vector.")


def swizzle(size: int, names: str) -> property:
    """Read/write accessor for the first `size` components as a list."""
    def fget(self) -> List[float]:
        return [float(v) for v in self._values[:size]]

    def fset(self, values) -> None:
        self._values[:size] = linalg.read_components(values, size)

    return property(fget, fset, doc=f"The {names} components of the vector.")


def _format_component(value: float) -> str:
    # from 1e21 up repr gives exponent notation, e.g. "1e+21"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


class VectorBase:
    """
    Fixed-size float32 vector with the destination-parameter convention.

    Conventions
    -----------
    Two call shapes exist for every binary operation:

    - class-level (free) operations, e.g. ``Vector3.sum(a, b, dest=None)``:
      without `dest` a NEW instance receives the result. Operands are never
      mutated.
    - instance operations, e.g. ``a.add(b, dest=None)``: without `dest` the
      RECEIVER is mutated in place and returned. `b` is never mutated.

    Unary operations (`negate`, `scale`, `normalize`) default to the receiver
    as well, except `copy`, which defaults to a new instance.

    Every operation reads all of its inputs before writing the destination,
    so a destination aliasing an operand (``a.add(a, a)``) is well defined.

    Degenerate cases
    ----------------
    `normalize` and `direction` never divide by a zero length: the
    destination is zeroed instead.
    """
    __slots__ = ("_values",)

    SIZE: int = 0

    def __init__(self, *components: Component) -> None:
        if len(components) == 1 and _is_sequence(components[0]):
            self._values = linalg.read_components(components[0], self.SIZE)
        else:
            self._values = linalg.read_components(components, self.SIZE)

    ############################
    # NAMED CONSTANTS
    ############################

    @classmethod
    def zero(cls):
        return cls()

    @classmethod
    def one(cls):
        return cls([1.0] * cls.SIZE)

    ############################
    # HELPERS
    ############################

    def _read(self) -> np.ndarray:
        # double-precision snapshot of the components, taken before any write
        return self._values.astype(np.float64)

    def _write(self, values) -> None:
        self._values[:] = values

    @classmethod
    def _target(cls, dest):
        return cls() if dest is None else dest

    @property
    def values(self) -> Float32Array:
        """Copy of the underlying float32 buffer."""
        return self._values.copy()

    def to_list(self) -> List[float]:
        return [float(v) for v in self._values]

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_list())

    def __str__(self) -> str:
        return "(" + ", ".join(_format_component(v) for v in self) + ")"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self)})"

    ############################
    # FREE OPERATIONS
    ############################

    @classmethod
    def dot(cls, vector: "VectorBase", vector2: "VectorBase") -> float:
        return float(np.dot(vector._read(), vector2._read()))

    @classmethod
    def distance(cls, vector: "VectorBase", vector2: "VectorBase") -> float:
        return math.sqrt(cls.squared_distance(vector, vector2))

    @classmethod
    def squared_distance(cls, vector: "VectorBase", vector2: "VectorBase") -> float:
        return linalg.squared_norm(vector2._read() - vector._read())

    @classmethod
    def direction(cls, vector: "VectorBase", vector2: "VectorBase", dest=None):
        """
        Unit vector pointing from `vector2` towards `vector`.

        The difference taken is ``vector - vector2``. Coincident points give
        the zero vector.

        Parameters
        ----------
        vector : VectorBase
            End point.
        vector2 : VectorBase
            Start point.
        dest : VectorBase, optional
            Destination. A new instance when omitted.

        Returns
        -------
        VectorBase
            The destination.
        """
        dest = cls._target(dest)
        d = vector._read() - vector2._read()
        length = math.sqrt(float(np.dot(d, d)))
        if length == 0.0:
            dest.reset()
            return dest
        dest._write(d * (1.0 / length))
        return dest

    @classmethod
    def lerp(cls, a: "VectorBase", b: "VectorBase", t: float, dest=None):
        """Component-wise ``a + t * (b - a)``; a new instance when `dest` is omitted."""
        dest = cls._target(dest)
        va, vb = a._read(), b._read()
        dest._write(va + t * (vb - va))
        return dest

    @classmethod
    def sum(cls, vector: "VectorBase", vector2: "VectorBase", dest=None):
        dest = cls._target(dest)
        dest._write(vector._read() + vector2._read())
        return dest

    @classmethod
    def difference(cls, vector: "VectorBase", vector2: "VectorBase", dest=None):
        dest = cls._target(dest)
        dest._write(vector._read() - vector2._read())
        return dest

    @classmethod
    def product(cls, vector: "VectorBase", vector2: "VectorBase", dest=None):
        """Component-wise product; a new instance when `dest` is omitted."""
        dest = cls._target(dest)
        dest._write(vector._read() * vector2._read())
        return dest

    @classmethod
    def quotient(cls, vector: "VectorBase", vector2: "VectorBase", dest=None):
        """
        Component-wise quotient; a new instance when `dest` is omitted.

        A zero divisor component gives inf/nan in that slot, silently.
        """
        dest = cls._target(dest)
        with np.errstate(divide="ignore", invalid="ignore"):
            dest._write(vector._read() / vector2._read())
        return dest

    ############################
    # INSTANCE OPERATIONS
    ############################

    def at(self, index: int) -> float:
        return float(self._values[index])

    def reset(self) -> None:
        self._values.fill(0.0)

    def copy(self, dest=None):
        """Copy the components into `dest`, or into a new instance."""
        dest = self._target(dest)
        dest._write(self._values)
        return dest

    def negate(self, dest=None):
        dest = self if dest is None else dest
        dest._write(-self._read())
        return dest

    def equals(self, other: "VectorBase", threshold: Threshold = None) -> bool:
        """
        Component-wise approximate equality.

        Parameters
        ----------
        other : VectorBase
            Vector to compare with.
        threshold : float, optional
            Largest accepted absolute difference per component. Defaults to
            `ScalarMath.EPSILON`.
        """
        if threshold is None:
            threshold = ScalarMath.EPSILON
        for a, b in zip(self, other):
            if abs(a - b) > threshold:
                return False
        return True

    def length(self) -> float:
        return linalg.norm(self._values)

    def squared_length(self) -> float:
        return linalg.squared_norm(self._values)

    def add(self, vector: "VectorBase", dest=None):
        dest = self if dest is None else dest
        dest._write(self._read() + vector._read())
        return dest

    def subtract(self, vector: "VectorBase", dest=None):
        dest = self if dest is None else dest
        dest._write(self._read() - vector._read())
        return dest

    def multiply(self, vector: "VectorBase", dest=None):
        """Component-wise product, in place unless `dest` is given."""
        dest = self if dest is None else dest
        dest._write(self._read() * vector._read())
        return dest

    def divide(self, vector: "VectorBase", dest=None):
        """Component-wise quotient, in place unless `dest` is given."""
        dest = self if dest is None else dest
        with np.errstate(divide="ignore", invalid="ignore"):
            dest._write(self._read() / vector._read())
        return dest

    def scale(self, value: float, dest=None):
        dest = self if dest is None else dest
        dest._write(self._read() * value)
        return dest

    def normalize(self, dest=None):
        """
        Scale to unit length, in place unless `dest` is given.

        A unit-length source is copied unchanged, a zero-length source
        yields the zero vector.
        """
        dest = self if dest is None else dest
        linalg.normalize(self._values, dest._values)
        return dest


def _is_sequence(value: object) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, (VectorBase, Iterable)) or np.ndim(value) > 0
