# tests/conftest.py
import pytest
import structlog

from attrguard import Validatable, ValidationEngine
from attrguard.config import get_settings


class Record(Validatable):
    """Dict-backed entity that records every attribute read."""

    def __init__(self, **values):
        self.values = values
        self.reads = []

    def read_attribute(self, name):
        self.reads.append(name)
        return self.values.get(name)


@pytest.fixture
def engine():
    return ValidationEngine(log_evaluations=False)


@pytest.fixture
def user_class():
    """User entity with name, number and owner rules."""

    class User(Validatable):
        def __init__(self, name=None, number=None, owner=None):
            self.name = name
            self.number = number
            self.owner = owner

    User.validates("name", presence=True)
    User.validates("number", format=r"A-Z{0,3}", presence=True)
    User.validates("owner", type=int)
    return User


@pytest.fixture
def record_class():
    """A fresh Record subclass, so each test gets an empty registry."""

    class TestRecord(Record):
        pass

    return TestRecord


@pytest.fixture(autouse=True)
def reset_config():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
