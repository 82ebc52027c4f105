from __future__ import annotations

import logging
from typing import Dict, Mapping, Type

from linmath.io._yaml import dump_yaml, load_yaml
from linmath.vectors import Vector2, Vector3, Vector4, VectorBase

logger = logging.getLogger(__name__)

_BY_SIZE: Dict[int, Type[VectorBase]] = {
    Vector2.SIZE: Vector2,
    Vector3.SIZE: Vector3,
    Vector4.SIZE: Vector4,
}


def dump_vectors(vectors: Mapping[str, VectorBase], path: str) -> None:
    """
    Write named vectors to a YAML file.

    Each vector is stored as a flow sequence of its components under the
    top-level `vectors` field:

        vectors:
          origin: [0.0, 0.0, 0.0]
          uv: [0.5, 1.0]
    """
    dump_yaml({"vectors": dict(vectors)}, path)
    logger.debug("Wrote %d vectors to %s", len(vectors), path)


def load_vectors(path: str) -> Dict[str, VectorBase]:
    """
    Read named vectors written by `dump_vectors`.

    The vector class is chosen from the sequence length.

    Raises
    ------
    KeyError
        If the document has no `vectors` field.
    ValueError
        If an entry is not a sequence of 2, 3 or 4 numbers.
    """
    d = load_yaml(path)
    try:
        entries = d["vectors"]
    except KeyError as e:
        raise KeyError("The specified YAML file does not contain a field called 'vectors'") from e
    if not isinstance(entries, Mapping):
        raise ValueError("'vectors' must be a mapping of name -> component list.")

    out: Dict[str, VectorBase] = {}
    for name, values in entries.items():
        if not isinstance(values, list):
            raise ValueError(f"Vector {name!r} must be a list of components, got {type(values).__name__}.")
        try:
            cls = _BY_SIZE[len(values)]
        except KeyError as e:
            raise ValueError(
                f"Vector {name!r} has {len(values)} components; expected one of {sorted(_BY_SIZE)}."
            ) from e
        out[str(name)] = cls(values)
    return out
