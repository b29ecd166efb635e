# topmark:header:start
#
#   project      : ErrProc
#   file         : test_errproc_config.py
#   file_relpath : tests/config/test_errproc_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading, discovering and resolving ErrProc configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from errproc.builtins import ErrorCollector, log_error
from errproc.config import ErrprocConfig, resolve_reference
from errproc.config.loaders import load_toml_dict
from errproc.errors import ErrprocConfigError, ProcessorImportError
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_are_empty() -> None:
    """The default configuration registers nothing."""
    cfg = ErrprocConfig.from_defaults()
    assert cfg.processors == ()
    assert cfg.log_level is None
    assert cfg.resolve_processors() == ()
    assert cfg.resolve_log_level() is None


def test_load_errproc_toml(tmp_path: Path) -> None:
    """errproc.toml is read from its top-level table."""
    path = tmp_path / "errproc.toml"
    path.write_text(
        'processors = ["errproc.builtins:log_error"]\nlog_level = "debug"\n',
        encoding="utf-8",
    )

    cfg = ErrprocConfig.load(path)
    assert cfg.processors == ("errproc.builtins:log_error",)
    assert cfg.log_level == "debug"
    assert cfg.resolve_log_level() == logging.DEBUG
    assert cfg.config_files == (path,)
    assert cfg.resolve_processors() == (log_error,)


def test_load_pyproject_section(tmp_path: Path) -> None:
    """pyproject.toml is read from [tool.errproc]."""
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "demo"\n\n[tool.errproc]\nprocessors = ["errproc.builtins.log_error"]\n',
        encoding="utf-8",
    )

    cfg = ErrprocConfig.load(path)
    assert cfg.resolve_processors() == (log_error,)


def test_pyproject_without_section_is_empty(tmp_path: Path) -> None:
    """A pyproject.toml without [tool.errproc] yields no processors."""
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert ErrprocConfig.load(path).processors == ()


def test_discover_prefers_errproc_toml(tmp_path: Path) -> None:
    """discover() picks errproc.toml over pyproject.toml."""
    (tmp_path / "pyproject.toml").write_text(
        '[tool.errproc]\nprocessors = ["errproc.builtins:log_error"]\n', encoding="utf-8"
    )
    (tmp_path / "errproc.toml").write_text("processors = []\n", encoding="utf-8")

    cfg = ErrprocConfig.discover(tmp_path)
    assert cfg.processors == ()
    assert cfg.config_files == (tmp_path / "errproc.toml",)


def test_discover_pyproject_and_nothing(tmp_path: Path) -> None:
    """discover() falls back to pyproject.toml, then to defaults."""
    assert ErrprocConfig.discover(tmp_path) == ErrprocConfig.from_defaults()

    (tmp_path / "pyproject.toml").write_text("[tool.errproc]\n", encoding="utf-8")
    cfg = ErrprocConfig.discover(tmp_path)
    assert cfg.config_files == (tmp_path / "pyproject.toml",)


def test_invalid_toml_is_logged_and_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Unparseable TOML is logged and treated as an empty table."""
    path = tmp_path / "errproc.toml"
    path.write_text("processors = [\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        assert load_toml_dict(path) == {}
        assert ErrprocConfig.load(path).processors == ()
    assert any("Error decoding TOML" in r.getMessage() for r in caplog.records)


def test_missing_file_is_logged_and_empty(tmp_path: Path) -> None:
    """A missing file yields an empty table."""
    assert load_toml_dict(tmp_path / "absent.toml") == {}


@parametrize(
    "data",
    [
        {"processors": "errproc.builtins:log_error"},
        {"processors": [1, 2]},
        {"log_level": True},
        {"log_level": ["INFO"]},
    ],
)
def test_wrong_value_types_raise(data: dict[str, object]) -> None:
    """Known keys with the wrong type raise ErrprocConfigError."""
    with pytest.raises(ErrprocConfigError):
        ErrprocConfig.from_toml_dict(data)


def test_unknown_log_level_raises() -> None:
    """An unknown level name is rejected when resolved."""
    with pytest.raises(ErrprocConfigError, match="Unknown log level"):
        ErrprocConfig(log_level="LOUD").resolve_log_level()


def test_unknown_keys_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are logged and do not fail loading."""
    with caplog.at_level(logging.WARNING):
        cfg = ErrprocConfig.from_toml_dict({"processors": [], "colour": "red"})
    assert cfg.processors == ()
    assert any("colour" in r.getMessage() for r in caplog.records)


def test_resolve_reference_forms() -> None:
    """Both colon and dotted references resolve, including nested attributes."""
    assert resolve_reference("errproc.builtins:log_error") is log_error
    assert resolve_reference(" errproc.builtins.log_error ") is log_error
    assert resolve_reference("errproc.builtins:ErrorCollector.clear") is ErrorCollector.clear


@parametrize(
    ("ref", "exc"),
    [
        ("log_error", ErrprocConfigError),
        ("errproc.builtins:", ErrprocConfigError),
        ("errproc.constants:ENV_LOG_LEVEL", ErrprocConfigError),
        ("errproc_missing_module:hook", ProcessorImportError),
        ("errproc.builtins:no_such_hook", ProcessorImportError),
    ],
)
def test_resolve_reference_errors(ref: str, exc: type[Exception]) -> None:
    """Malformed, missing and non-callable references raise config errors."""
    with pytest.raises(exc):
        resolve_reference(ref)


def test_config_errors_are_value_errors() -> None:
    """Config errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        resolve_reference("errproc_missing_module:hook")
