"""
Tests for the package-level translation functions.
"""
import sqlmeta
from sqlmeta.types import MAX_SIZE, SqlType


def test_module_functions():
    """Test the module facade over the default mapper"""
    assert sqlmeta.map_to_sql_type('i64') == SqlType.BIGINT
    assert sqlmeta.map_to_sql_type_name('i64') == 'BIGINT'
    assert sqlmeta.is_signed(sqlmeta.map_to_sql_type('i64')) is True

    assert sqlmeta.display_size('int') == 11
    assert sqlmeta.precision('decimal(10,2)') == 10
    assert sqlmeta.scale('decimal(10,2)') == 2
    assert sqlmeta.display_size('map<string,int>') == MAX_SIZE


def test_error_groups():
    """Test the exception groupings"""
    assert sqlmeta.UnrecognizedType in sqlmeta.TranslationError
    assert sqlmeta.InvalidColumn in sqlmeta.ContractError
    assert sqlmeta.MissingTypeInfo in sqlmeta.ContractError
    for exc in (sqlmeta.UnrecognizedType, sqlmeta.InvalidColumn,
                sqlmeta.MissingTypeInfo, sqlmeta.UnsupportedFacet,
                sqlmeta.InvariantViolation):
        assert issubclass(exc, sqlmeta.MetadataError)


def test_exports():
    for name in sqlmeta.__all__:
        assert hasattr(sqlmeta, name), name
