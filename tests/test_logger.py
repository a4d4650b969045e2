"""Tests for logging setup."""

from __future__ import annotations

import logging

from fxwindow.logger import configure, get_logger


class TestConfigure:
    def test_levels(self) -> None:
        configure(verbose=True)
        assert logging.getLogger("fxwindow").level == logging.DEBUG
        configure(verbose=False)
        assert logging.getLogger("fxwindow").level == logging.WARNING

    def test_single_handler(self) -> None:
        root = logging.getLogger("fxwindow")
        configure()
        count = len(root.handlers)
        configure()
        assert len(root.handlers) == count

    def test_module_logger_is_child(self) -> None:
        assert get_logger("fxwindow.fx").parent is logging.getLogger("fxwindow")
