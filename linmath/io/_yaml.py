from __future__ import annotations

import logging
from typing import Dict, Any

from linmath.vectors import VectorBase

logger = logging.getLogger(__name__)

def dump_yaml(data: Dict[str, Any], path: str) -> None:
    """
    Write a mapping to YAML.

    `VectorBase` values anywhere in `data` are written as flow sequences of
    their components (``[1.0, 2.0, 3.0]``); plain lists keep block style.
    """
    try:
        import yaml
    except ImportError as e:
        raise ImportError("PyYAML is required to write YAML. Install with `pip install pyyaml`.") from e

    class _VectorDumper(yaml.SafeDumper):
        def ignore_aliases(self, data: Any) -> bool:
            # a vector reused under several names is written out each time
            return isinstance(data, VectorBase) or super().ignore_aliases(data)

    def vector_representer(dumper: yaml.Dumper, vector: VectorBase):
        return dumper.represent_sequence("tag:yaml.org,2002:seq", vector.to_list(), flow_style=True)

    # multi: Vector2, Vector3 and Vector4 all resolve to this representer
    _VectorDumper.add_multi_representer(VectorBase, vector_representer)

    logger.debug("Writing YAML to %s", path)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(
            data,
            f,
            Dumper=_VectorDumper,
            sort_keys=False,
            default_flow_style=False,
            width=120,
            indent=2,
        )


def load_yaml(path: str) -> Dict[str, Any]:
    try:
        import yaml
    except ImportError as e:
        raise ImportError("PyYAML is required to read YAML. Install with `pip install pyyaml`.") from e
    logger.debug("Reading YAML from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError("YAML root must be a mapping (dict).")
    return data
