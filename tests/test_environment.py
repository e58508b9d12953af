import os

import pytest

from ftshell.environment import (
    DEFAULT_PATH,
    NO_VALUE,
    Environment,
    init_env,
    is_valid_env_name,
    minimal_env,
)


def test_add_and_get():
    env = Environment()
    env.add("HOME", "/home/user")
    assert env.get("HOME") == "/home/user"
    assert len(env) == 1


def test_add_none_value_becomes_empty():
    env = Environment()
    env.add("EMPTY", None)
    assert env.get("EMPTY") == ""


def test_add_empty_key_is_ignored():
    env = Environment()
    env.add("", "value")
    assert len(env) == 0


def test_iteration_keeps_insertion_order():
    env = Environment([("B", "2"), ("A", "1"), ("C", "3")])
    assert list(env) == ["B", "A", "C"]


def test_duplicate_keys_first_wins():
    env = Environment([("X", "first"), ("X", "second")])
    assert len(env) == 2
    assert env.get("X") == "first"


def test_get_missing_returns_none():
    env = Environment([("A", "1")])
    assert env.get("B") is None


def test_contains():
    env = Environment([("A", "1")])
    assert "A" in env
    assert "B" not in env
    assert 5 not in env


def test_update_existing():
    env = Environment([("A", "1")])
    env.update("A", "changed")
    assert env.get("A") == "changed"


def test_update_missing_does_not_add():
    env = Environment([("A", "1")])
    env.update("B", "2")
    assert "B" not in env
    assert len(env) == 1


@pytest.mark.parametrize("key", ["A", "B", "C"])
def test_delete_removes_only_that_key(key):
    env = Environment([("A", "1"), ("B", "2"), ("C", "3")])
    env.delete(key)
    assert key not in env
    assert list(env) == [k for k in ["A", "B", "C"] if k != key]


def test_delete_missing_is_noop():
    env = Environment([("A", "1")])
    env.delete("Z")
    assert list(env) == ["A"]


def test_delete_removes_first_duplicate():
    env = Environment([("X", "first"), ("X", "second")])
    env.delete("X")
    assert env.get("X") == "second"


def test_delete_requires_exact_name():
    env = Environment([("PATH", "p")])
    env.delete("PAT")
    assert env.get("PATH") == "p"


def test_env_lines_skip_no_value():
    env = Environment([("A", "1"), ("B", NO_VALUE), ("C", "")])
    assert env.env_lines() == ["A=1", "C="]


def test_export_lines_sorted_and_formatted():
    env = Environment([("ZED", "z"), ("ALPHA", NO_VALUE), ("MID", "m")])
    assert env.export_lines() == [
        "declare -x ALPHA",
        'declare -x MID="m"',
        'declare -x ZED="z"',
    ]


def test_export_lines_cover_every_variable():
    env = Environment([("b", "1"), ("A", "2"), ("_", "3")])
    lines = env.export_lines()
    assert len(lines) == len(env)
    assert lines == sorted(lines)


def test_update_shlvl_increments():
    env = Environment([("SHLVL", "3")])
    env.update_shlvl()
    assert env.get("SHLVL") == "4"


def test_update_shlvl_missing_adds_one():
    env = Environment([("A", "1")])
    env.update_shlvl()
    assert env.get("SHLVL") == "1"
    assert list(env) == ["A", "SHLVL"]


def test_update_shlvl_non_numeric_starts_at_one():
    env = Environment([("SHLVL", "abc")])
    env.update_shlvl()
    assert env.get("SHLVL") == "1"


def test_update_shlvl_wraps_at_int_max():
    env = Environment([("SHLVL", "2147483647")])
    env.update_shlvl()
    assert env.get("SHLVL") == "-2147483648"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("PATH", True),
        ("_x1", True),
        ("A=b-c", True),
        ("1A", False),
        ("", False),
        ("=A", False),
        ("A-B", False),
        (None, False),
    ],
)
def test_is_valid_env_name(name, expected):
    assert is_valid_env_name(name) is expected


def test_init_env_parses_entries():
    env = init_env(["A=1", "B=x=y", "NOEQ", "=v", "C="])
    assert list(env) == ["A", "B", "C"]
    assert env.get("B") == "x=y"
    assert env.get("C") == ""


def test_init_env_empty_gives_minimal(tmp_path):
    env = init_env([], str(tmp_path))
    assert env.get("PWD") == str(tmp_path)
    assert env.get("SHLVL") == "1"
    assert env.get("PATH") == "/usr/local/bin:/usr/bin:/bin"


def test_init_env_none_gives_minimal(tmp_path):
    env = init_env(None, str(tmp_path))
    assert list(env) == ["PWD", "SHLVL", "PATH"]


def test_minimal_env_uses_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    env = minimal_env()
    assert env.get("PWD") == os.getcwd()
    assert env.get("PATH") == DEFAULT_PATH
    assert env.env_lines() == [
        f"PWD={os.getcwd()}",
        "SHLVL=1",
        f"PATH={DEFAULT_PATH}",
    ]