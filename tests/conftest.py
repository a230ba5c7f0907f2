"""
Pytest configuration and fixtures for fieldguard tests

This module provides shared fixtures for unit and integration tests.
"""
import pytest

from fieldguard.core.models import FailureLog
from fieldguard.core.rules import Validator
from fieldguard.core.validators import email_address_validator


# Domains the stubbed MX lookup treats as existing
KNOWN_MX_DOMAINS = {"gmail.com", "mail.com", "productor.cl"}


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't touch the network"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run the engine end to end from config files"
    )


# =======================
# DNS FIXTURES
# =======================

@pytest.fixture
def stub_mx_lookup(monkeypatch):
    """
    Replace the MX lookup so tests never hit the network.

    Returns:
        List of (domain, timeout) lookups made during the test
    """
    lookups = []

    def fake_has_mx_record(domain, timeout=None):
        lookups.append((domain, timeout))
        return domain in KNOWN_MX_DOMAINS

    monkeypatch.setattr(email_address_validator, "has_mx_record", fake_has_mx_record)
    return lookups


# =======================
# ENGINE FIXTURES
# =======================

@pytest.fixture
def failures() -> FailureLog:
    """Empty failure log for driving validators directly"""
    return FailureLog()


@pytest.fixture
def validator() -> Validator:
    """Fresh validator engine with default settings"""
    return Validator()


@pytest.fixture
def rules_file(tmp_path):
    """
    Write a rules YAML file and return its path

    Usage:
        path = rules_file("rules:\\n  name: required\\n")
    """
    def _write(content: str, name: str = "rules.yaml"):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
