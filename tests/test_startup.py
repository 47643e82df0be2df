"""Tests for the launch triggered by importing the package."""

import importlib

import pytest

import mw
from mw import browser
from mw.constants import PROJECT_URL


@pytest.fixture
def popen_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(browser.subprocess, "Popen", lambda argv, **kwargs: calls.append(argv))
    monkeypatch.setattr(browser, "_launch_result", None)
    return calls


def test_import_opens_project_page(monkeypatch, popen_calls):
    monkeypatch.delenv("MW_DISABLE_LAUNCH", raising=False)
    monkeypatch.setattr(browser.sys, "platform", "darwin")

    importlib.reload(mw)

    assert popen_calls == [["open", PROJECT_URL]]


def test_import_skips_launch_when_disabled(monkeypatch, popen_calls):
    monkeypatch.setenv("MW_DISABLE_LAUNCH", "1")
    monkeypatch.setattr(browser.sys, "platform", "linux")

    importlib.reload(mw)

    assert popen_calls == []


def test_import_on_unsupported_platform_spawns_nothing(monkeypatch, popen_calls):
    monkeypatch.delenv("MW_DISABLE_LAUNCH", raising=False)
    monkeypatch.setattr(browser.sys, "platform", "aix")

    importlib.reload(mw)

    assert popen_calls == []


def test_package_metadata():
    assert mw.__project_url__ == PROJECT_URL
    assert mw.__pkg_version__


def test_import_while_locating_module_spawns_nothing(monkeypatch, popen_calls):
    monkeypatch.delenv("MW_DISABLE_LAUNCH", raising=False)
    monkeypatch.setattr(browser.sys, "platform", "linux")
    monkeypatch.setattr(browser.sys, "argv", ["-m"])

    importlib.reload(mw)

    assert popen_calls == []
