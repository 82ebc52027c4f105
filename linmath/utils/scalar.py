from __future__ import annotations

import numpy as np
from numpy import pi

_RNG = np.random.default_rng()


class ScalarMath:
    """
    Scalar constants and pure helper functions shared by the vector types.

    Notes
    -----
    `EPSILON` is the default tolerance of every approximate comparison in the
    library (see `linmath.config` to change the vector default at runtime).
    """
    EPSILON: float = 0.00001
    DEGREE: float = pi / 180.0   # radians per degree
    RADIANS: float = 180.0 / pi  # degrees per radian
    LOG10E: float = 0.4342945
    LOG2E: float = 1.442695
    PI: float = pi
    PI_OVER_2: float = pi / 2.0
    PI_OVER_4: float = pi / 4.0
    TWO_PI: float = pi * 2.0

    @staticmethod
    def random() -> float:
        """Uniform sample in [0, 1)."""
        return float(_RNG.random())

    @staticmethod
    def to_radian(degrees: float) -> float:
        return degrees * ScalarMath.DEGREE

    @staticmethod
    def to_degree(radians: float) -> float:
        return radians * ScalarMath.RADIANS

    @staticmethod
    def clamp(min: float, max: float, value: float) -> float:
        """
        Restrict `value` to the interval [min, max].

        The upper bound is applied first, then the lower one: with
        min > max the result is `min`.
        """
        value = max if value > max else value
        value = min if value < min else value
        return value

    @staticmethod
    def lerp(min: float, max: float, amount: float) -> float:
        """Linear interpolation; `amount` outside [0, 1] extrapolates."""
        return min + (max - min) * amount

    @staticmethod
    def distance(value1: float, value2: float) -> float:
        return abs(value1 - value2)

    @staticmethod
    def equals(a: float, b: float, tolerance: float = EPSILON) -> bool:
        """
        Approximate equality within an absolute or relative tolerance.

        Parameters
        ----------
        a, b : float
            Values to compare.
        tolerance : float
            Tolerance, `EPSILON` by default.

        Returns
        -------
        bool
            True if |a - b| <= tolerance * max(1, |a|, |b|).

        Notes
        -----
        The tolerance is absolute for magnitudes up to 1.0 and scales with the
        larger magnitude above it.
        """
        return bool(abs(a - b) <= tolerance * max(1.0, abs(a), abs(b)))
