"""Integration tests need a migrated PostgreSQL database.

They are skipped unless DATABASE__URL is set explicitly.
"""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    if os.environ.get("DATABASE__URL"):
        return

    skip = pytest.mark.skip(reason="DATABASE__URL not set, no database to test against")
    for item in items:
        if "integration" in item.path.parts:
            item.add_marker(skip)
