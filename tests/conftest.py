"""
Pytest Configuration and Fixtures for the Registration Library

Provides the shared fixtures used by the unit and integration suites:
fixed reference dates, relative birth-date helpers, in-memory and file-backed
storage, user collections and a valid registration form.

Every test runs with the ``testing`` configuration and with the default
local store redirected to a per-test temporary file.
"""

import os
import sys
from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

# Select the testing configuration before the package reads its settings
os.environ['REGISTRATION_CONFIG'] = 'testing'

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from user_registration.config import TestingConfig
from user_registration.services.storage import LocalStorage, MemoryStorage
from user_registration.services.user_store import UserStore


# =============================================================================
# PYTEST CONFIGURATION AND MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers",
        "unit: Unit tests for individual components and functions"
    )
    config.addinivalue_line(
        "markers",
        "integration: Integration tests for services and workflows"
    )


# =============================================================================
# DATE FIXTURES
# =============================================================================

def shift_years(years: int, reference: Optional[date] = None) -> date:
    """Same month/day ``years`` years before ``reference`` (Feb 29 falls back to Feb 28)."""
    reference = reference or date.today()
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        return reference.replace(year=reference.year - years, day=28)


@pytest.fixture
def reference_date() -> date:
    """Fixed 'today' used by the boundary tests."""
    return date(2026, 2, 6)


@pytest.fixture
def years_ago() -> Callable[..., date]:
    return shift_years


# =============================================================================
# STORAGE FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_default_storage(tmp_path, monkeypatch) -> Path:
    """Point the configured default store at a per-test file."""
    storage_path = tmp_path / "default_storage.json"
    monkeypatch.setattr(TestingConfig, "STORAGE_PATH", str(storage_path))
    return storage_path


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def file_storage(tmp_path) -> LocalStorage:
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def memory_store(memory_storage) -> UserStore:
    return UserStore(memory_storage)


# =============================================================================
# DATA FIXTURES
# =============================================================================

@pytest.fixture
def existing_users() -> List[Dict[str, Any]]:
    return [
        {"email": "john@example.com", "firstName": "John"},
        {"email": "jane@example.com", "firstName": "Jane"},
        {"email": "bob@example.com", "firstName": "Bob"},
    ]


@pytest.fixture
def stored_user() -> Dict[str, Any]:
    return {
        "firstName": "Marie",
        "lastName": "Curie",
        "email": "marie.curie@example.com",
        "age": 42,
        "postalCode": "75005",
        "city": "Paris",
        "timestamp": "2026-01-15T10:30:00Z",
    }


@pytest.fixture
def valid_form_data() -> Dict[str, str]:
    """A complete, valid submission for someone who is 30 today."""
    return {
        "firstName": "Jean",
        "lastName": "Dupont",
        "email": "jean.dupont@example.com",
        "birthDate": shift_years(30).isoformat(),
        "postalCode": "75001",
        "city": "Paris",
    }
