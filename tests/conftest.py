"""Pytest configuration: makes the shared fixtures available to every test."""

from tests.fixtures import *  # noqa: F401,F403
