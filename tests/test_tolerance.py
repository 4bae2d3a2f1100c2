import pytest

from geomkit import tolerance
from geomkit.direction import Direction2d
from geomkit.tolerance import close, isgoodnum
from geomkit.vector import Vector2d


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    for name in (tolerance.GEOMKIT_EPSILON, tolerance.GEOMKIT_UNIT_TOLERANCE,
                 tolerance.GEOMKIT_VALIDATE_FRAMES):
        monkeypatch.delenv(name, raising=False)
    tolerance.clear_cache()
    yield
    tolerance.clear_cache()


def test_defaults():
    assert tolerance.epsilon() == tolerance.DEFAULT_EPSILON == 5e-6
    assert tolerance.unit_tolerance() == tolerance.DEFAULT_UNIT_TOLERANCE
    assert tolerance.validate_frames() is False


def test_epsilon_from_environment(monkeypatch):
    monkeypatch.setenv(tolerance.GEOMKIT_EPSILON, "0.1")
    ## cached until cleared
    assert tolerance.epsilon() == 5e-6
    tolerance.clear_cache()
    assert tolerance.epsilon() == 0.1
    assert close(1.0, 1.05)
    assert Vector2d(1, 0).is_close(Vector2d(1.05, 0))


def test_unit_tolerance_from_environment(monkeypatch):
    with pytest.raises(ValueError):
        Direction2d(1.001, 0.0)
    monkeypatch.setenv(tolerance.GEOMKIT_UNIT_TOLERANCE, "0.01")
    tolerance.clear_cache()
    Direction2d(1.001, 0.0)


@pytest.mark.parametrize("raw", ["abc", "-1", "0"])
def test_bad_values(monkeypatch, raw):
    monkeypatch.setenv(tolerance.GEOMKIT_EPSILON, raw)
    tolerance.clear_cache()
    with pytest.raises(ValueError, match="GEOMKIT_EPSILON"):
        tolerance.epsilon()


def test_blank_value_uses_default(monkeypatch):
    monkeypatch.setenv(tolerance.GEOMKIT_UNIT_TOLERANCE, "  ")
    tolerance.clear_cache()
    assert tolerance.unit_tolerance() == tolerance.DEFAULT_UNIT_TOLERANCE


@pytest.mark.parametrize("raw,expected", [
    ("1", True), ("true", True), ("YES", True), ("on", True),
    ("0", False), ("no", False), ("", False),
])
def test_validate_frames_flag(monkeypatch, raw, expected):
    monkeypatch.setenv(tolerance.GEOMKIT_VALIDATE_FRAMES, raw)
    tolerance.clear_cache()
    assert tolerance.validate_frames() is expected


def test_close_and_isgoodnum():
    assert close(1.0, 1.0 + 1e-7)
    assert not close(1.0, 1.1)
    assert close(1.0, 1.1, tol=0.2)
    assert isgoodnum(3)
    assert isgoodnum(2.5)
    assert not isgoodnum(True)
    assert not isgoodnum("3")
