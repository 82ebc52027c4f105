from __future__ import annotations

from typing import Iterable, Optional, Union

import numpy as np
from numpy.typing import NDArray, ArrayLike

Float32Array = NDArray[np.float32]

Component  = Union[float, int, None]
Components = Union[Iterable[Component], ArrayLike]

Threshold = Optional[float]

__all__ = [
    "ArrayLike",
    "Float32Array",
    "Component", "Components",
    "Threshold",
]
