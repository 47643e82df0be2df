import pytest

from mw.config import is_launch_disabled


@pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", " Yes "])
def test_launch_disabled_for_truthy_values(monkeypatch, value):
    monkeypatch.setenv("MW_DISABLE_LAUNCH", value)
    assert is_launch_disabled() is True


@pytest.mark.parametrize("value", ["", "0", "false", "no", "off"])
def test_launch_enabled_for_other_values(monkeypatch, value):
    monkeypatch.setenv("MW_DISABLE_LAUNCH", value)
    assert is_launch_disabled() is False


def test_launch_enabled_when_unset(monkeypatch):
    monkeypatch.delenv("MW_DISABLE_LAUNCH", raising=False)
    assert is_launch_disabled() is False
