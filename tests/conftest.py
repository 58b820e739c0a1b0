"""Test configuration and fixtures."""

import os

# Settings are read from the environment
os.environ.setdefault("ENVIRONMENT", "test")
