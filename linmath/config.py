from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping

from linmath.utils.scalar import ScalarMath

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToleranceConfig:
    """
    Tolerances of approximate comparisons, loaded and passed explicitly.

    Parameters
    ----------
    epsilon
        Largest absolute per-component difference to accept, passed as
        ``v.equals(w, cfg.epsilon)``. Vector `equals` without a threshold
        always uses `ScalarMath.EPSILON`.

    Notes
    -----
    Loading a configuration never changes any library default.
    """
    epsilon: float = ScalarMath.EPSILON

    def validate(self) -> None:
        eps = float(self.epsilon)
        if not math.isfinite(eps) or eps < 0:
            raise ValueError(f"tolerance.epsilon must be finite and >= 0, got {self.epsilon}.")

    def to_dict(self) -> dict[str, Any]:
        return {"epsilon": float(self.epsilon)}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ToleranceConfig":
        cfg = cls(epsilon=float(d.get("epsilon", ScalarMath.EPSILON)))
        cfg.validate()
        return cfg


def save_config(config: ToleranceConfig, path: str) -> None:
    from linmath.io import dump_yaml

    config.validate()
    dump_yaml({"tolerance": config.to_dict()}, path)
    logger.info("Saved tolerance configuration to %s", path)


def load_config(path: str) -> ToleranceConfig:
    """
    Read a `ToleranceConfig` from a YAML file with a `tolerance` mapping.

    Raises
    ------
    KeyError
        If the document has no `tolerance` field.
    ValueError
        If the values do not validate.
    """
    from linmath.io import load_yaml

    d = load_yaml(path)
    try:
        section = d["tolerance"]
    except KeyError as e:
        raise KeyError("The specified YAML file does not contain a field called 'tolerance'") from e
    if not isinstance(section, Mapping):
        raise ValueError("'tolerance' must be a mapping.")
    cfg = ToleranceConfig.from_dict(section)
    logger.info("Loaded tolerance configuration from %s: epsilon=%g", path, cfg.epsilon)
    return cfg
