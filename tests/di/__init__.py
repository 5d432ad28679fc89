"""Test providers; importing this registers the persistence mock."""

from tests.di.container import build_test_container
from tests.di.persistence import MockPersistenceProvider

__all__ = ["MockPersistenceProvider", "build_test_container"]
