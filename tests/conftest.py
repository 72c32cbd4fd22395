"""Pytest configuration.

Run pytest from this project's root. pythonpath in pyproject.toml puts src/
and the project root on sys.path so `tests.estree_builders` resolves without
an installed package.
"""

import pytest

from max_params_linter.infrastructure.checker import CollectingReporter


@pytest.fixture
def collecting_reporter() -> CollectingReporter:
    """Fresh reporter that keeps diagnostics in visit order."""
    return CollectingReporter()
