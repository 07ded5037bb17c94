"""Tests for logging utilities."""

import logging
from io import StringIO

from qstep import CircuitExecutor, initialize
from qstep.logging import configure_logging, get_logger, set_log_level


def test_get_logger_returns_namespaced_logger():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "qstep.test_module"
    assert get_logger("qstep.circuit.core").name == "qstep.circuit.core"
    assert get_logger().name == "qstep"


def test_get_logger_caching():
    assert get_logger("test_module") is get_logger("test_module")
    assert get_logger("module1") is not get_logger("module2")


def test_no_duplicate_handlers():
    logger = get_logger("handlers_module")
    n = len(logger.handlers)
    get_logger("handlers_module")
    assert len(logger.handlers) == n == 1


def test_set_log_level_accepts_names():
    logger = get_logger("level_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level(logging.ERROR)
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_executor_transitions_are_logged():
    captured = StringIO()
    try:
        configure_logging(level=logging.INFO, stream=captured)
        circuit = initialize(1)
        circuit.add_gate("X", ["q0"])
        CircuitExecutor(circuit).run()
        output = captured.getvalue()
        assert "idle -> running" in output
        assert "running -> completed" in output
        assert "qstep.circuit.executor" in output
    finally:
        configure_logging(level=logging.WARNING)
