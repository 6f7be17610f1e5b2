"""Shared pytest fixtures and test doubles."""

from .core import *  # noqa: F401,F403
from .users import *  # noqa: F401,F403
