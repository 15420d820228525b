"""Shared fixtures for the test suite."""

from unittest.mock import Mock

import pytest

from keyset_i18n.logging import I18NLogger


@pytest.fixture
def mock_logger():
    """Mock diagnostic sink exposing log(message)."""
    return Mock(spec=I18NLogger)
