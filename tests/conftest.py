"""Shared fixtures for container tests."""

import pytest

from vessel import Container


class Service:
    """Plain object built by factories in tests."""

    def __init__(self, name: str = "service"):
        self.name = name


class CountingFactory:
    """Factory that records how often it was invoked."""

    def __init__(self, build=Service):
        self.build = build
        self.calls = 0
        self.containers = []

    def __call__(self, container):
        self.calls += 1
        self.containers.append(container)
        return self.build()


@pytest.fixture
def container():
    """Provide an empty container."""
    return Container()


@pytest.fixture
def counting_factory():
    """Provide a factory with a call counter."""
    return CountingFactory()
