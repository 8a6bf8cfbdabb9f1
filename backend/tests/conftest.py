"""Root conftest — shared test configuration."""

import os

# Tests never bind a socket
os.environ.setdefault("APP_ENV", "test")
