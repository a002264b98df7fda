"""
SQL metadata translation for engine column types.

Translates an engine's textual column types (``int``, ``decimal(10,2)``,
``map<string,int>``) into the standard SQL type model: type code, canonical
type name, display size, precision, scale and signedness.

All translation operations can be called either as:
- Module functions: sqlmeta.map_to_sql_type('bigint')
- ResultSetMetadata methods: md.column_type(1)
"""
__version__ = '0.1.0'

from sqlmeta.adapters.column_info import Column
from sqlmeta.adapters.type_attributes import ColumnAttributes, column_attributes
from sqlmeta.adapters.type_attributes import column_display_size
from sqlmeta.adapters.type_attributes import column_precision, column_scale
from sqlmeta.adapters.type_attributes import is_signed
from sqlmeta.adapters.type_mapping import ResolvedType, TypeMapper
from sqlmeta.adapters.type_mapping import map_to_sql_type, map_to_sql_type_name
from sqlmeta.adapters.type_mapping import python_type, resolve_type
from sqlmeta.exceptions import ContractError, InvalidColumn, InvariantViolation
from sqlmeta.exceptions import MetadataError, MissingTypeInfo, TranslationError
from sqlmeta.exceptions import UnrecognizedType, UnsupportedFacet
from sqlmeta.metadata import ResultSetMetadata
from sqlmeta.options import MetadataOptions
from sqlmeta.types import Nullability, SqlType


def display_size(raw_type: str) -> int:
    """Display size of a raw engine type.
    """
    resolved = resolve_type(raw_type)
    return column_display_size(resolved.sql_type, resolved)


def precision(raw_type: str) -> int:
    """Decimal precision of a raw engine type.
    """
    resolved = resolve_type(raw_type)
    return column_precision(resolved.sql_type, resolved)


def scale(raw_type: str) -> int:
    """Decimal scale of a raw engine type.
    """
    resolved = resolve_type(raw_type)
    return column_scale(resolved.sql_type, resolved)


__all__ = [
    'map_to_sql_type',
    'map_to_sql_type_name',
    'resolve_type',
    'python_type',
    'display_size',
    'precision',
    'scale',
    'column_attributes',
    'column_display_size',
    'column_precision',
    'column_scale',
    'is_signed',
    'Column',
    'ColumnAttributes',
    'ResolvedType',
    'TypeMapper',
    'ResultSetMetadata',
    'MetadataOptions',
    'Nullability',
    'SqlType',
    'MetadataError',
    'UnrecognizedType',
    'InvalidColumn',
    'MissingTypeInfo',
    'UnsupportedFacet',
    'InvariantViolation',
    'ContractError',
    'TranslationError',
]
