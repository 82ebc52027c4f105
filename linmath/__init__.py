from .utils.scalar import ScalarMath
from .vectors import (
    VectorBase,
    Vector2,
    Vector3,
    Vector4,
)
from .config import (
    ToleranceConfig,
    load_config,
    save_config,
)
from .io import (
    dump_yaml,
    load_yaml,
    dump_vectors,
    load_vectors,
)
