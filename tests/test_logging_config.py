#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Logging Configuration Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
License:        MIT License
================================================================================
"""

import logging
import pytest
from diatomic_md.logging_config import (
    HANDLER_TAG,
    LOGGER_NAME,
    level_for_verbosity,
    setup_logging,
)
from diatomic_md.simulation import SimulationParameters, simulate_molecule


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    original_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if getattr(handler, HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(original_level)


def owned(logger):
    return [h for h in logger.handlers if getattr(h, HANDLER_TAG, False)]


class TestVerbosity:
    """Tests for the -v flag mapping."""

    def test_levels(self):
        """No flag warns, -v informs, -vv debugs."""
        assert level_for_verbosity(0) == logging.WARNING
        assert level_for_verbosity(1) == logging.INFO
        assert level_for_verbosity(2) == logging.DEBUG
        assert level_for_verbosity(5) == logging.DEBUG


class TestSetupLogging:
    """Tests for handler installation."""

    def test_level_applied(self, package_logger):
        logger = setup_logging(logging.INFO)
        assert logger is package_logger
        assert logger.level == logging.INFO
        assert all(h.level == logging.INFO for h in owned(logger))

    def test_repeated_setup_does_not_duplicate(self, package_logger):
        """Calling again, as every app rerun does, keeps one console handler."""
        for _ in range(3):
            setup_logging(logging.INFO)
        assert len(owned(package_logger)) == 1

    def test_foreign_handlers_kept(self, package_logger):
        """Handlers installed elsewhere survive a reconfiguration."""
        foreign = logging.NullHandler()
        package_logger.addHandler(foreign)
        try:
            setup_logging(logging.DEBUG)
            assert foreign in package_logger.handlers
        finally:
            package_logger.removeHandler(foreign)

    def test_log_file(self, package_logger, tmp_path):
        """Engine messages reach the log file."""
        path = tmp_path / "run.log"
        setup_logging(logging.INFO, str(path))
        assert len(owned(package_logger)) == 2

        simulate_molecule(SimulationParameters("harmonic", "H", 10.0, 1.0))
        for handler in owned(package_logger):
            handler.flush()

        text = path.read_text(encoding="utf-8")
        assert "Integrating harmonic/H" in text
        assert "diatomic_md.simulation" in text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
