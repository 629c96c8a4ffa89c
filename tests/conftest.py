"""Root pytest configuration and shared fixtures.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (no database)
    │   ├── sso_auth/      # Hashing, keys, tokens, error taxonomy
    │   ├── sso_config/    # Settings parsing
    │   ├── application/   # AuthenticationService with mocked ports
    │   └── infrastructure/
    └── integration/       # In-memory SQLite, HTTP app and CLI
"""

import pytest

from sso_auth import KeyPair, KeyService, PasswordHashingService
from sso_config import clear_settings_cache

# Argon2id with a small memory cost keeps the suite fast
TEST_MEMORY_COST_KIB = 1024


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Make every test read settings from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Password hasher with test-friendly cost parameters."""
    return PasswordHashingService(memory_cost=TEST_MEMORY_COST_KIB)


@pytest.fixture(scope="session")
def key_pair() -> KeyPair:
    """RSA key pair shared by the whole test session."""
    return KeyService.generate_key_pair(2048)


@pytest.fixture(scope="session")
def other_key_pair() -> KeyPair:
    """A second, unrelated RSA key pair."""
    return KeyService.generate_key_pair(2048)
