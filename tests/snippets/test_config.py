from pathlib import Path

import pytest

from snippetsls.snippets.config import (
    InitializationOptions,
    default_snippets_file,
    expand_home,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    return tmp_path


@pytest.fixture
def no_home(monkeypatch):
    def _raise(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(_raise))


def test_expand_home(home):
    assert expand_home("~/snippets.toml") == home / "snippets.toml"


def test_expand_home_leaves_other_paths(home):
    assert expand_home("/etc/snippets.toml") == Path("/etc/snippets.toml")
    assert expand_home("~user/snippets.toml") == Path("~user/snippets.toml")


def test_expand_home_without_home(no_home):
    assert expand_home("~/snippets.toml") == Path("~/snippets.toml")


def test_default_snippets_file(home):
    assert default_snippets_file() == home / ".config" / "snippets-ls" / "snippets.toml"


def test_default_snippets_file_without_home(no_home):
    assert default_snippets_file() is None


def test_from_raw_none():
    options = InitializationOptions.from_raw(None)

    assert options.snippets_file is None
    assert options.snippets == {}


def test_from_raw_not_a_mapping():
    options = InitializationOptions.from_raw(["snippets"])

    assert options == InitializationOptions()


def test_from_raw_empty_uses_default_file(home):
    options = InitializationOptions.from_raw({})

    assert options.snippets_file == home / ".config" / "snippets-ls" / "snippets.toml"


def test_from_raw_full(home):
    options = InitializationOptions.from_raw(
        {
            "snippetsFile": "~/snippets.toml",
            "snippets": {"ruby": {"pry": "binding.pry"}},
        }
    )

    assert options.snippets_file == home / "snippets.toml"
    assert options.snippets == {"ruby": {"pry": "binding.pry"}}


@pytest.mark.parametrize("value", [None, 1, ["a.toml"], {"path": "a.toml"}])
def test_from_raw_file_not_a_string(value):
    options = InitializationOptions.from_raw({"snippetsFile": value})

    assert options.snippets_file is None


@pytest.mark.parametrize(
    "value",
    [
        "ruby",
        ["pry"],
        {"ruby": "binding.pry"},
        {"ruby": {"pry": None}},
    ],
)
def test_from_raw_invalid_inline_snippets(value, home):
    options = InitializationOptions.from_raw({"snippets": value})

    assert options.snippets == {}
    assert options.snippets_file is not None
