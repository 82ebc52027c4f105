import pytest

from linmath.config import ToleranceConfig, load_config, save_config
from linmath.io import dump_yaml
from linmath.utils.scalar import ScalarMath
from linmath.vectors import Vector2


def test_default_epsilon_matches_scalar_math():
    assert ToleranceConfig().epsilon == ScalarMath.EPSILON


def test_validate_rejects_negative_or_non_finite():
    with pytest.raises(ValueError):
        ToleranceConfig(epsilon=-1.0).validate()
    with pytest.raises(ValueError):
        ToleranceConfig(epsilon=float("nan")).validate()
    with pytest.raises(ValueError):
        ToleranceConfig(epsilon=float("inf")).validate()
    ToleranceConfig(epsilon=0.0).validate()


def test_epsilon_is_passed_explicitly_to_equals():
    a, b = Vector2(0, 0), Vector2(0.05, 0)
    cfg = ToleranceConfig(epsilon=0.1)
    assert a.equals(b, cfg.epsilon)
    assert not a.equals(b, ToleranceConfig(epsilon=0.01).epsilon)


def test_loaded_config_leaves_equals_default_alone(tmp_path):
    path = str(tmp_path / "loose.yaml")
    save_config(ToleranceConfig(epsilon=0.1), path)
    cfg = load_config(path)
    assert cfg.epsilon == 0.1
    # the default threshold stays ScalarMath.EPSILON
    assert not Vector2(0, 0).equals(Vector2(0.05, 0))
    assert not ScalarMath.equals(0.0, 0.05)


def test_save_config_rejects_invalid_config(tmp_path):
    path = tmp_path / "bad.yaml"
    with pytest.raises(ValueError):
        save_config(ToleranceConfig(epsilon=-0.1), str(path))
    assert not path.exists()


def test_dict_round_trip():
    cfg = ToleranceConfig(epsilon=0.001)
    assert cfg.to_dict() == {"epsilon": 0.001}
    assert ToleranceConfig.from_dict(cfg.to_dict()) == cfg
    assert ToleranceConfig.from_dict({}) == ToleranceConfig()


def test_yaml_round_trip(tmp_path):
    path = str(tmp_path / "tolerance.yaml")
    save_config(ToleranceConfig(epsilon=0.002), path)
    assert load_config(path) == ToleranceConfig(epsilon=0.002)


def test_load_config_missing_field(tmp_path):
    path = str(tmp_path / "other.yaml")
    dump_yaml({"something": {"epsilon": 0.1}}, path)
    with pytest.raises(KeyError):
        load_config(path)


def test_load_config_invalid_value(tmp_path):
    path = str(tmp_path / "bad.yaml")
    dump_yaml({"tolerance": {"epsilon": -3.0}}, path)
    with pytest.raises(ValueError):
        load_config(path)
