"""
Tests for engine type alias configuration.
"""
import json

import pytest
from sqlmeta.adapters.type_mapping import TypeMapper, map_to_sql_type
from sqlmeta.config.type_mapping import TypeMappingConfig
from sqlmeta.exceptions import UnrecognizedType
from sqlmeta.options import MetadataOptions
from sqlmeta.types import SqlType


def test_type_mapping_config_defaults():
    """Test the singleton starts without aliases"""
    config = TypeMappingConfig.get_instance()
    assert config is TypeMappingConfig.get_instance()
    assert config.get_alias('long') is None


def test_add_alias():
    """Test aliases resolve through the default mapper"""
    config = TypeMappingConfig.get_instance()
    config.add_alias('Long', 'BIGINT')
    assert config.get_alias('long') == 'bigint'
    assert config.aliases == {'long': 'bigint'}

    assert map_to_sql_type('long') == SqlType.BIGINT
    assert map_to_sql_type('LONG') == SqlType.BIGINT


def test_realias_after_resolution():
    """Test changing an alias replaces earlier cached resolutions"""
    config = TypeMappingConfig.get_instance()
    mapper = TypeMapper(config=config)
    config.add_alias('long', 'bigint')
    assert map_to_sql_type('long') == SqlType.BIGINT
    assert mapper.map_to_sql_type('long') == SqlType.BIGINT

    generation = config.generation
    config.add_alias('long', 'int')
    assert config.generation == generation + 1
    assert map_to_sql_type('long') == SqlType.INTEGER
    assert mapper.map_to_sql_type('long') == SqlType.INTEGER
    assert mapper.map_to_sql_type_name('long') == 'INT'


def test_alias_never_overrides_builtin():
    """Test built-in keys win over aliases"""
    TypeMappingConfig.get_instance().add_alias('int', 'string')
    assert map_to_sql_type('int') == SqlType.INTEGER


def test_alias_to_unknown_target():
    """Test an alias onto an unknown type stays unrecognized"""
    TypeMappingConfig.get_instance().add_alias('blob', 'binary')
    with pytest.raises(UnrecognizedType, match='binary'):
        map_to_sql_type('blob')


def test_load_config(alias_file):
    """Test aliases load from a JSON file"""
    config = TypeMappingConfig(config_file=alias_file)
    assert config.get_alias('long') == 'bigint'
    assert config.get_alias('text') == 'string'

    mapper = TypeMapper(config=config)
    assert mapper.map_to_sql_type('text') == SqlType.VARCHAR
    assert mapper.map_to_sql_type_name('text') == 'STRING'


def test_options_type_mapping_file(alias_file):
    """Test a mapper built from options reads its own alias file"""
    mapper = TypeMapper(MetadataOptions(type_mapping_file=str(alias_file)))
    assert mapper.map_to_sql_type('long') == SqlType.BIGINT
    assert TypeMappingConfig.get_instance().get_alias('long') is None


def test_load_config_bad_file(tmp_path, caplog):
    """Test a malformed file logs a warning and loads nothing"""
    path = tmp_path / 'bad.json'
    path.write_text('{not json')
    config = TypeMappingConfig(config_file=path)
    assert config.aliases == {}
    assert 'Failed to load type mapping config' in caplog.text


def test_load_config_bad_entries(tmp_path, caplog):
    """Test non-string alias targets are skipped"""
    path = tmp_path / 'type_mapping.json'
    path.write_text(json.dumps({'aliases': {'long': 'bigint', 'weird': 5}}))
    config = TypeMappingConfig(config_file=path)
    assert config.aliases == {'long': 'bigint'}
    assert 'weird' in caplog.text


def test_load_config_aliases_not_object(tmp_path, caplog):
    """Test an aliases list is rejected"""
    path = tmp_path / 'type_mapping.json'
    path.write_text(json.dumps({'aliases': ['long']}))
    config = TypeMappingConfig(config_file=path)
    assert config.aliases == {}
    assert 'Failed to load type mapping config' in caplog.text


if __name__ == '__main__':
    __import__('pytest').main([__file__])
