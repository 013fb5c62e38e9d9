# topmark:header:start
#
#   project      : SdUnit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Pytest configuration for the SdUnit test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from sdunit.config import logging
from sdunit.model import Daemon, Install, Service, Socket, Unit

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

DATA_DIR: Path = Path(__file__).parent / "data"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_sdunit_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure SdUnit's runtime log level is not forced via env during tests.

    CLI runs reconfigure the root logger against Click's captured streams; the
    test-session logging setup is restored afterwards.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def example_agent() -> Daemon:
    """Return the reference daemon used across the suite (`data/example-agent.service`)."""
    return Daemon(
        unit=Unit(
            description="Example Agent",
            documentation="https://example.com/agent",
            after="syslog.target network-online.target",
        ),
        service=Service(
            type="exec",
            exec_start="/usr/bin/example-agent",
            restart="always",
            restart_sec="10",
            environment="LOG_LEVEL=warn",
            user="root",
            group="root",
            limit_nofile="65536",
        ),
        install=Install(wanted_by="multi-user.target"),
    )


def socket_activated() -> Daemon:
    """Return a daemon with a ``[Socket]`` section."""
    return Daemon(
        unit=Unit(description="Echo server"),
        service=Service(exec_start="/usr/bin/echo-server", standard_input="socket"),
        install=Install(wanted_by="sockets.target"),
        socket=Socket(listen_stream="127.0.0.1:9999", accept="yes"),
    )


@pytest.fixture
def agent() -> Daemon:
    """The reference daemon (see `example_agent`)."""
    return example_agent()


@pytest.fixture
def data_dir() -> Path:
    """Directory of the static test fixtures."""
    return DATA_DIR
