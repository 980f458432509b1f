"""Test configuration shared by every test module."""

from tests.fixtures import *  # noqa: F401,F403
