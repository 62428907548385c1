"""Settings for the test suite.

Supplies the values that production must configure explicitly, then
reuses the regular settings unchanged.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")

from config.settings import *  # noqa: E402,F401,F403
