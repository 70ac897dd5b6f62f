"""Pytest configuration and shared fixtures."""

import pytest

from fpds.datastructures import immutable_list as lst
from fpds.datastructures.binary_tree import Branch, Leaf
from fpds.logging import configure_logging


@pytest.fixture(autouse=True)
def structured_logging():
    """Route structlog through stdlib logging so caplog sees every event."""
    configure_logging(level="WARNING", format_json=False, include_timestamp=False)
    yield


@pytest.fixture
def sample_list():
    """The five-element list used throughout the exercises."""
    return lst.construct(1, 2, 3, 4, 5)


@pytest.fixture
def sample_tree():
    """Five levels deep counted in nodes, five leaves, four branches."""
    return Branch(Branch(Branch(Leaf(2), Branch(Leaf(4), Leaf(12))), Leaf(3)), Leaf(9))


@pytest.fixture
def config_dir(tmp_path):
    """Empty configuration directory; tests write settings.yaml into it."""
    return tmp_path
