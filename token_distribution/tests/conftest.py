"""Pytest configuration and shared fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def debug_logging(caplog):
    """Capture debug logs from the package in every test."""
    caplog.set_level(logging.DEBUG, logger="token_distribution")
    yield
