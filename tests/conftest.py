import pytest

from dressings.data import parse_dataset
from dressings.index import build_index
from dressings.models import Dataset


@pytest.fixture
def raw_dataset() -> dict:
    return {
        "dressings": [
            {"name": "Base", "page": 10},
            {"name": "Combo", "page": 12, "components": ["Base"]},
            {"name": "Ranch", "page": 14},
            {"name": "Lonely"},
        ],
        "salads": [
            {"name": "X", "page": 30, "dressing": "Combo"},
            {"name": "Garden", "page": 32, "dressing": "Ranch"},
        ],
        "bowls": [
            {"name": "Grain Bowl", "dressing": "Base"},
        ],
    }


@pytest.fixture
def dataset(raw_dataset: dict) -> Dataset:
    return parse_dataset(raw_dataset)


@pytest.fixture
def index(dataset: Dataset):
    return build_index(dataset)
