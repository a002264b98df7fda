import json

import pytest
import sqlmeta.adapters.type_mapping as tm
from sqlmeta.config.type_mapping import TypeMappingConfig


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the alias config and default mapper around each test."""
    TypeMappingConfig._instance = None
    tm._default_mapper = None
    yield
    TypeMappingConfig._instance = None
    tm._default_mapper = None


@pytest.fixture
def alias_file(tmp_path):
    """Write a type mapping file with a couple of engine aliases."""
    path = tmp_path / 'type_mapping.json'
    path.write_text(json.dumps({'aliases': {'long': 'bigint', 'text': 'string'}}))
    return path


@pytest.fixture
def metadata():
    """Result set with one column of each scalar kind."""
    from sqlmeta.metadata import ResultSetMetadata
    return ResultSetMetadata(['id', 'name', 'score'], ['int', 'string', 'double'])
