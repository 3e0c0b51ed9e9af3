from pathlib import Path

import pytest

from xml_property_store.store import PropertiesStore

DATA_DIR = Path(__file__).resolve().parent / "fixtures" / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def store() -> PropertiesStore:
    props = PropertiesStore()
    props.set_data_path(DATA_DIR)
    return props
