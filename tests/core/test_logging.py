"""
Tests for the logging setup of the engine.
"""

import logging

import catchery
from rich.logging import RichHandler

from ironfist.combat import combat_manager, damage
from ironfist.core.logging import setup_logging
from ironfist.effects import effect_manager


def test_engine_traces_share_one_logger():
    """
    Test that the simulator, the damage rules and the status engine all
    report through catchery, so one handler shows every trace.
    """
    assert combat_manager.log_debug is catchery.log_debug
    assert damage.log_debug is catchery.log_debug
    assert effect_manager.log_debug is catchery.log_debug


def test_setup_logging_installs_rich_handler():
    """
    Test that the root logger gets a single rich handler at the given level.
    """
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging(logging.DEBUG)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
