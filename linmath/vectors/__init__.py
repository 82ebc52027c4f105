from .base import VectorBase
from .vector3 import Vector3
from .vector2 import Vector2
from .vector4 import Vector4
