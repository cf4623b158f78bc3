"""
Shared pytest fixtures and configuration for ssm-migrate tests.

Nobody wants a test suite that needs real AWS credentials, so the store is
faked in memory and records every call made against it.
"""

import copy
import os
import shutil
import tempfile

import pytest

from ssm_migrate.config_schema import DEFAULT_CONFIG
from ssm_migrate.parameter_store import (
    Parameter,
    ParameterNotFoundError,
    ParameterStoreRejectedError,
    ParameterSummary,
)


class FakeParameterStore:
    """In-memory stand-in for SSMParameterStore."""

    def __init__(self):
        self.parameters = {}
        self.calls = []
        self.failures = {}
        self.hidden_metadata = set()

    def add(self, name, value, type='String', description=''):
        self.parameters[name] = Parameter(
            name=name, value=value, type=type, description=description, version=1
        )

    def fail(self, operation, name, error):
        """Make ``operation`` raise ``error`` when called for ``name``."""
        self.failures[(operation, name)] = error

    def _check_failure(self, operation, name):
        error = self.failures.get((operation, name))
        if error is not None:
            raise error

    def list_all(self):
        self.calls.append(('list_all', None))
        return [
            ParameterSummary(name=p.name, type=p.type, description=p.description)
            for p in self.parameters.values()
        ]

    def get_by_name(self, name, decrypt=True):
        self.calls.append(('get_by_name', name))
        self._check_failure('get_by_name', name)
        if name not in self.parameters:
            raise ParameterNotFoundError(f"ParameterNotFound: {name}")
        return copy.copy(self.parameters[name])

    def describe_by_name_filter(self, name):
        self.calls.append(('describe_by_name_filter', name))
        self._check_failure('describe_by_name_filter', name)
        if name not in self.parameters or name in self.hidden_metadata:
            return []
        param = self.parameters[name]
        return [ParameterSummary(name=param.name, type=param.type, description=param.description)]

    def put(self, name, value, type, description='', overwrite=False):
        self.calls.append(('put', name))
        self._check_failure('put', name)
        existing = self.parameters.get(name)
        if existing is not None and not overwrite:
            raise ParameterStoreRejectedError(f"ParameterAlreadyExists: {name}")
        version = existing.version + 1 if existing else 1
        self.parameters[name] = Parameter(
            name=name, value=value, type=type, description=description, version=version
        )
        return version

    def calls_for(self, name):
        return [operation for operation, called_name in self.calls if called_name == name]


@pytest.fixture
def temp_dir():
    """Create a temporary directory that's automatically cleaned up."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def fake_store():
    return FakeParameterStore()


@pytest.fixture
def config_factory():
    """Factory for migration configs based on the defaults."""
    def _create_config(**overrides):
        config = copy.deepcopy(DEFAULT_CONFIG)
        config.update(overrides)
        return config
    return _create_config


@pytest.fixture
def ns_config(config_factory):
    """Short names used throughout the copy tests: /ns/... -> /ns/sp/..."""
    return config_factory(namespace='ns', subsystem='sp', variables=['REDISCLOUD_URL'])


@pytest.fixture
def config_file(temp_dir):
    """Create a basic config file for testing."""
    config_path = os.path.join(temp_dir, "config.yaml")
    with open(config_path, 'w') as f:
        f.write("""
namespace: ns
subsystem: sp
variables:
  - REDISCLOUD_URL
  - LOG_LEVEL
overwrite: true
""")
    return config_path
