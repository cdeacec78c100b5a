from __future__ import annotations

import logging

import pytest
from _pytest.monkeypatch import MonkeyPatch

from app.core import config
from app.core.logging import get_logger, setup_logging
from app.main import cors_headers


@pytest.mark.parametrize(
    "value,expected",
    [("1", True), ("true", True), ("Yes", True), ("0", False), ("false", False), ("", False)],
)
def test__bool_env(value: str, expected: bool, monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("SOME_FLAG", value)

    assert config._bool_env("SOME_FLAG", True) is expected


def test__int_env(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("SOME_PORT", "9001")
    assert config._int_env("SOME_PORT", 8000) == 9001

    monkeypatch.setenv("SOME_PORT", "not-a-port")
    assert config._int_env("SOME_PORT", 8000) == 8000


@pytest.mark.parametrize(
    "value,expected",
    [
        ("*", ["*"]),
        ("https://vyomgarud.in, *", ["*"]),
        ("https://vyomgarud.in, https://www.vyomgarud.in,", ["https://vyomgarud.in", "https://www.vyomgarud.in"]),
        ("", []),
    ],
)
def test__origins_env(value: str, expected: list[str], monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("SOME_ORIGINS", value)

    assert config._origins_env("SOME_ORIGINS", "*") == expected


@pytest.mark.parametrize(
    "origin,request_headers,allowed,expected_origin,expected_headers",
    [
        ("https://vyomgarud.in", None, ["*"], "https://vyomgarud.in", "*"),
        (None, None, ["*"], "*", "*"),
        ("https://vyomgarud.in", "content-type", ["https://vyomgarud.in"], "https://vyomgarud.in", "content-type"),
    ],
)
def test__cors_headers_allowed(
    origin: str | None, request_headers: str | None, allowed: list[str], expected_origin: str, expected_headers: str
) -> None:
    headers = cors_headers(origin, request_headers, allowed)

    assert headers["Access-Control-Allow-Origin"] == expected_origin
    assert headers["Access-Control-Allow-Headers"] == expected_headers
    assert headers["Access-Control-Allow-Credentials"] == "false"


@pytest.mark.parametrize("origin", ["https://evil.example", None])
def test__cors_headers_refused(origin: str | None) -> None:
    assert cors_headers(origin, "content-type", ["https://vyomgarud.in"]) == {}


def test__get_logger_is_namespaced() -> None:
    assert get_logger("foo").name == "app.foo"
    assert get_logger("app.crud").name == "app.crud"


def test__setup_logging_is_idempotent() -> None:
    logger = setup_logging("DEBUG")
    handlers = list(logger.handlers)
    setup_logging("WARNING")

    assert logger.level == logging.WARNING
    assert logger.handlers == handlers
    assert sum(1 for h in logger.handlers if isinstance(h, logging.StreamHandler)) == 1
