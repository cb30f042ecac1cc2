"""Shared fixtures for vcsverify tests."""

import os
import pathlib

import pytest

from tests.helpers import FakeGit


@pytest.fixture
def fake_git() -> FakeGit:
    """A scripted git with no repositories registered yet."""
    return FakeGit()


@pytest.fixture
def vendor_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty vendor directory for fake package installs."""
    vendor = tmp_path / "vendor"
    vendor.mkdir()
    return vendor


@pytest.fixture
def language_env():
    """Restore ``LANGUAGE`` after a test that inspects or changes it."""
    original = os.environ.get("LANGUAGE")
    yield
    if original is None:
        os.environ.pop("LANGUAGE", None)
    else:
        os.environ["LANGUAGE"] = original
