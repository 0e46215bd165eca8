"""Shared fixtures for locedit tests."""

import logging
from pathlib import Path

import pytest

from locedit.config import ScanConfig
from locedit.format_handlers import StringsHandler


@pytest.fixture
def handler():
    """Fixture to create a StringsHandler with default settings."""
    return StringsHandler(ScanConfig())


@pytest.fixture
def make_file(tmp_path):
    """Fixture returning a helper that writes a file below tmp_path."""
    def _make_file(relative: str, content: str = '"key" = "value";\n') -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _make_file


@pytest.fixture
def project(make_file, tmp_path):
    """Small Xcode-like project with two groups in two languages."""
    make_file("App/en.lproj/Localizable.strings",
              '/* Greeting */\n"greeting" = "Hello";\n"farewell" = "Bye";\n')
    make_file("App/fr.lproj/Localizable.strings",
              '"greeting" = "Bonjour";\n')
    make_file("App/en.lproj/InfoPlist.strings",
              '"CFBundleName" = "Demo";\n')
    make_file("App/Pods/en.lproj/Localizable.strings",
              '"pod" = "ignored";\n')
    return tmp_path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a test's stderr."""
    yield
    logger = logging.getLogger("locedit")
    for log_handler in list(logger.handlers):
        logger.removeHandler(log_handler)
        log_handler.close()
    logger.setLevel(logging.NOTSET)
