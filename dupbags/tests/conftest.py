from __future__ import annotations

import pytest

from dupbags.interface.bag import Bag
from dupbags.utils.config import DuplicateBagsConfig, apply_config


@pytest.fixture
def bag_ab() -> Bag:
    """Returns the bag `{"a": [1, 2], "b": [2, 3]}`."""
    return {"a": [1, 2], "b": [2, 3]}


@pytest.fixture
def bag_bc() -> Bag:
    """Returns the bag `{"b": [2, 4], "c": [5]}`, which shares key `b` with `bag_ab`."""
    return {"b": [2, 4], "c": [5]}


@pytest.fixture
def bag_with_empty_key() -> Bag:
    """Bag supplied as raw input, with a key mapped to an empty list."""
    return {"a": [1, 1, 2], "empty": []}


@pytest.fixture(autouse=True)
def reset_config():
    """Restore the default config after each test so that tests cannot leak settings."""
    yield
    apply_config(DuplicateBagsConfig())
