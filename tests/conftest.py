"""Pytest configuration and fixtures."""

import json
import logging
import threading
from collections.abc import Callable, Generator, Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog

from schemagen.config import GeneratorSettings
from schemagen.generator import Generator as SchemaGenerator
from schemagen.logging import LOGGER_NAME

SCHEMAS_DIR = Path(__file__).parent / "fixtures" / "schemas"


@pytest.fixture
def schemas_dir() -> Path:
    """Directory holding the fixture schema files."""
    return SCHEMAS_DIR


@pytest.fixture
def load_fixture_schema() -> Callable[[str], dict[str, Any]]:
    """Return a helper that reads a fixture schema as a raw dict."""

    def _load(file_name: str) -> dict[str, Any]:
        with open(SCHEMAS_DIR / file_name, encoding="utf-8") as f:
            data: dict[str, Any] = json.load(f)
        return data

    return _load


@pytest.fixture
def config() -> GeneratorSettings:
    """Settings with library defaults, isolated from SCHEMAGEN_ env vars."""
    return GeneratorSettings(_env_prefix="SCHEMAGEN_TEST_UNUSED_")


@pytest.fixture
def generator(config: GeneratorSettings) -> SchemaGenerator:
    """Deterministic generator."""
    return SchemaGenerator(seed=1234, config=config)


def _is_tracked_thread(t: threading.Thread) -> bool:
    """Only non-daemon threads other than the main thread are tracked."""
    return not t.daemon and t.name != "MainThread"


@pytest.fixture(autouse=True)
def thread_leak_tracker() -> Generator[None, None, None]:
    """Fail tests that start threads without joining them.

    Generators are meant to be confined to one thread each; concurrency
    tests must join every worker they start.
    """
    baseline = {t for t in threading.enumerate() if _is_tracked_thread(t)}

    yield

    leaked = {t for t in threading.enumerate() if _is_tracked_thread(t)} - baseline
    if leaked:
        pytest.fail(
            f"Thread leak detected - {len(leaked)} thread(s): "
            f"{[t.name for t in leaked]}. Tests must join all threads."
        )


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo handler and structlog changes after each test."""
    package_logger = logging.getLogger(LOGGER_NAME)
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
    structlog.reset_defaults()
