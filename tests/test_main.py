from __future__ import annotations

import logging

import pytest

from christmastree.errors import WindowCreationError
from christmastree.logging_config import parse_level, setup_logging
from christmastree.main import main, parse_args


def test_parse_args_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHRISTMASTREE_SEED", raising=False)
    monkeypatch.delenv("CHRISTMASTREE_LOG_LEVEL", raising=False)
    options = parse_args([])
    assert options.seed is None
    assert options.log_level == logging.INFO
    assert options.log_file is None


def test_parse_args_cli_wins_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHRISTMASTREE_SEED", "11")
    monkeypatch.setenv("CHRISTMASTREE_LOG_LEVEL", "warning")
    options = parse_args(["--seed", "3", "--log-level", "debug"])
    assert options.seed == 3
    assert options.log_level == logging.DEBUG


def test_parse_args_env_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHRISTMASTREE_SEED", "11")
    monkeypatch.setenv("CHRISTMASTREE_LOG_LEVEL", "warning")
    options = parse_args([])
    assert options.seed == 11
    assert options.log_level == logging.WARNING


@pytest.mark.parametrize("argv", [["--log-level", "loud"], ["--seed", "x"]])
def test_parse_args_rejects_bad_values(argv: list[str]) -> None:
    with pytest.raises(SystemExit):
        parse_args(argv)


def test_parse_level() -> None:
    assert parse_level(None) == logging.INFO
    assert parse_level("error") == logging.ERROR
    assert parse_level("15") == 15
    with pytest.raises(ValueError):
        parse_level("nope")


def test_setup_logging_writes_file(tmp_path) -> None:  # type: ignore[no-untyped-def]
    log_file = tmp_path / "tree.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logging.getLogger("christmastree.test").debug("hello")

    for handler in logging.getLogger("christmastree").handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    # calling again replaces the handlers instead of stacking them
    setup_logging(level=logging.INFO)
    assert len(logging.getLogger("christmastree").handlers) == 1


def test_main_exits_when_window_cannot_be_created(monkeypatch: pytest.MonkeyPatch) -> None:
    import christmastree.application

    def fail(*args, **kwargs):  # type: ignore[no-untyped-def]
        raise WindowCreationError("no display")

    monkeypatch.setattr(christmastree.application, "create_app", fail)
    assert main(["--seed", "1"]) == 1


def test_create_app_reuses_running_instance(qapp) -> None:  # type: ignore[no-untyped-def]
    from christmastree.application import create_app

    assert create_app() is qapp
    assert qapp.applicationDisplayName() == "Christmas Tree"


def test_package_logger_name() -> None:
    from christmastree.logging_config import PACKAGE_LOGGER

    assert PACKAGE_LOGGER == "christmastree"
