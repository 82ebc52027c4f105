import math

import numpy as np

from linmath.utils.types import Float32Array, Components

############################
# COMPONENT BUFFERS
############################

DTYPE = np.float32

def buffer(n: int) -> Float32Array:
    """Fresh zeroed component buffer of length `n`."""
    return np.zeros(n, dtype=DTYPE)

def read_components(values: Components, n: int) -> Float32Array:
    """
    Read up to `n` components from an ordered sequence into a new buffer.

    Reading is permissive: entries past `n` are ignored, missing trailing
    entries stay zero and `None` entries are read as zero. No error is
    raised for a wrong-length sequence.
    """
    out = buffer(n)
    for i, value in enumerate(values):
        if i >= n:
            break
        out[i] = 0.0 if value is None else value
    return out

def squared_norm(v: Float32Array) -> float:
    # accumulate in double precision, the buffer only stores float32
    v = np.asarray(v, dtype=np.float64)
    return float(np.dot(v, v))

def norm(v: Float32Array) -> float:
    return math.sqrt(squared_norm(v))

def normalize(v: Float32Array, out: Float32Array) -> Float32Array:
    """
    Write the unit-length version of `v` into `out`.

    Parameters
    ----------
    v : (N,) ndarray
        Source components. May be the same array as `out`.
    out : (N,) ndarray
        Destination buffer, written in place.

    Returns
    -------
    out : (N,) ndarray
        The destination buffer.

    Notes
    -----
    `out` first receives a copy of `v`. A length of exactly 1 returns that
    copy untouched, a length of exactly 0 zeroes `out` instead of dividing.
    NaN or Inf never come out of a zero-length input.
    """
    out[:] = v
    length = norm(out)
    if length == 1.0:
        return out
    if length == 0.0:
        out.fill(0.0)
        return out
    out[:] = np.asarray(out, dtype=np.float64) * (1.0 / length)
    return out
