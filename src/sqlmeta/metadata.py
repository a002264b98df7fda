"""
Result set metadata facade.

Answers per-column metadata queries for a result set described by parallel
lists of column names and raw engine types. Every ordinal is 1-based and
validated before any lookup. Facets the engine has no concept of raise
UnsupportedFacet rather than guessing.
"""
import logging
import threading
from typing import Any

import pandas as pd
import sqlalchemy as sa
from sqlmeta.adapters.column_info import Column
from sqlmeta.adapters.sqlalchemy_types import to_sqlalchemy_type
from sqlmeta.adapters.type_attributes import column_attributes
from sqlmeta.adapters.type_attributes import is_signed as type_is_signed
from sqlmeta.adapters.type_mapping import ResolvedType, TypeMapper
from sqlmeta.adapters.type_mapping import python_type
from sqlmeta.exceptions import InvalidColumn, MissingTypeInfo, UnsupportedFacet
from sqlmeta.options import MetadataOptions
from sqlmeta.types import Nullability, SqlType

from libb import attrdict

logger = logging.getLogger(__name__)

__all__ = ['ResultSetMetadata']


def _unsupported(facet: str):
    """Build a metadata method that always raises UnsupportedFacet."""

    def method(self, column: int) -> Any:
        raise UnsupportedFacet(facet)

    method.__name__ = facet
    method.__doc__ = f'Not supported: the engine has no {facet.replace("_", " ")}.'
    return method


class ResultSetMetadata:
    """Column metadata for one result set

    Technical implementation details:
    - Column names and raw types are fixed at construction
    - Each column's raw type is resolved once and cached under a lock
    - Size/precision/scale and signedness are derived from the resolved type

    Engine capability gaps:
    - No auto-increment, currency or not-null concepts: fixed answers
    - No catalog/schema/table names, case sensitivity, writability or
      searchability: UnsupportedFacet
    """

    SUPPORTED_FACETS = frozenset({
        'column_name',
        'column_label',
        'column_type',
        'column_type_name',
        'column_display_size',
        'precision',
        'scale',
        'is_signed',
        'column_python_type',
        'column_class_name',
        'sqlalchemy_type',
        'is_auto_increment',
        'is_currency',
        'is_nullable',
        })

    UNSUPPORTED_FACETS = frozenset({
        'catalog_name',
        'schema_name',
        'table_name',
        'is_case_sensitive',
        'is_read_only',
        'is_writable',
        'is_definitely_writable',
        'is_searchable',
        })

    def __init__(self,
                 column_names: list[str],
                 column_types: list[str] | None,
                 options: MetadataOptions | dict[str, Any] | None = None,
                 mapper: TypeMapper | None = None):
        """
        Initialize result set metadata

        Args:
            column_names: Column names in result order
            column_types: Raw engine type strings in result order, or None
                when the engine reported no type information
            options: MetadataOptions or a dict of its fields
            mapper: Optional TypeMapper; built from options when omitted
        """
        if isinstance(options, dict):
            options = MetadataOptions(**options)
        self.options = options or MetadataOptions()
        self.mapper = mapper or TypeMapper(self.options)
        self._has_types = column_types is not None
        self._columns = tuple(Column.from_lists(list(column_names),
                                                None if column_types is None
                                                else list(column_types)))
        self._resolved: list[ResolvedType | None] = [None] * len(self._columns)
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f'ResultSetMetadata(columns={[c.to_dict() for c in self._columns]!r})'

    @property
    def columns(self) -> tuple[Column, ...]:
        return self._columns

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @classmethod
    def supports(cls, facet: str) -> bool:
        """Whether a metadata facet has an engine equivalent.
        """
        return facet in cls.SUPPORTED_FACETS

    def _check_column(self, column: int) -> int:
        """Validate a 1-based ordinal and return the 0-based index.
        """
        if isinstance(column, bool) or not isinstance(column, int):
            raise InvalidColumn(column, self.column_count)
        if column < 1 or column > self.column_count:
            raise InvalidColumn(column, self.column_count)
        return column - 1

    def resolved_type(self, column: int) -> ResolvedType:
        """Resolved raw type of a column, cached after first access.

        Raises
            MissingTypeInfo: the result set carries no type list
            InvalidColumn: ordinal outside [1, column_count]
            UnrecognizedType: the raw type is not a known engine type
        """
        if not self._has_types:
            raise MissingTypeInfo
        index = self._check_column(column)

        resolved = self._resolved[index]
        if resolved is not None:
            return resolved

        resolved = self._columns[index].resolve(self.mapper)
        with self._lock:
            if self._resolved[index] is None:
                self._resolved[index] = resolved
                logger.debug(f'Column {column} resolved as {resolved.type_name}')
            return self._resolved[index]

    def column_name(self, column: int) -> str:
        return self._columns[self._check_column(column)].name

    def column_label(self, column: int) -> str:
        return self.column_name(column)

    def column_type(self, column: int) -> SqlType:
        return self.resolved_type(column).sql_type

    def column_type_name(self, column: int) -> str:
        return self.resolved_type(column).type_name

    def column_display_size(self, column: int) -> int:
        resolved = self.resolved_type(column)
        return column_attributes(resolved.sql_type, resolved).display_size

    def precision(self, column: int) -> int:
        resolved = self.resolved_type(column)
        return column_attributes(resolved.sql_type, resolved).precision

    def scale(self, column: int) -> int:
        resolved = self.resolved_type(column)
        return column_attributes(resolved.sql_type, resolved).scale

    def is_signed(self, column: int) -> bool:
        """Returns True if the column holds signed numbers.

        Non-numeric column types are never signed.
        """
        return type_is_signed(self.column_type(column))

    def column_python_type(self, column: int) -> type:
        return python_type(self.column_type(column))

    def column_class_name(self, column: int) -> str:
        """Qualified name of the Python class of column values.
        """
        cls = self.column_python_type(column)
        if cls.__module__ == 'builtins':
            return cls.__qualname__
        return f'{cls.__module__}.{cls.__qualname__}'

    def sqlalchemy_type(self, column: int) -> sa.types.TypeEngine:
        resolved = self.resolved_type(column)
        return to_sqlalchemy_type(resolved.sql_type, resolved)

    def is_auto_increment(self, column: int) -> bool:
        # no auto-increment concept
        self._check_column(column)
        return False

    def is_currency(self, column: int) -> bool:
        # no currency type
        self._check_column(column)
        return False

    def is_nullable(self, column: int) -> Nullability:
        # no not-null concept
        self._check_column(column)
        return Nullability.NULLABLE

    catalog_name = _unsupported('catalog_name')
    schema_name = _unsupported('schema_name')
    table_name = _unsupported('table_name')
    is_case_sensitive = _unsupported('is_case_sensitive')
    is_read_only = _unsupported('is_read_only')
    is_writable = _unsupported('is_writable')
    is_definitely_writable = _unsupported('is_definitely_writable')
    is_searchable = _unsupported('is_searchable')

    def describe(self, column: int) -> attrdict:
        """All supported facets of a column as an attrdict.
        """
        resolved = self.resolved_type(column)
        attributes = column_attributes(resolved.sql_type, resolved)
        return attrdict(
            ordinal=column,
            name=self.column_name(column),
            raw_type=resolved.raw_type,
            sql_type=resolved.sql_type,
            type_name=resolved.type_name,
            display_size=attributes.display_size,
            precision=attributes.precision,
            scale=attributes.scale,
            signed=type_is_signed(resolved.sql_type),
            nullable=Nullability.NULLABLE,
            python_type=python_type(resolved.sql_type).__name__,
            )

    def to_frame(self) -> pd.DataFrame:
        """Summarize every column as one DataFrame row.

        Always returns a DataFrame, with the columns preserved for an empty
        result set.
        """
        records = [dict(self.describe(i)) for i in range(1, self.column_count + 1)]
        columns = ['ordinal', 'name', 'raw_type', 'sql_type', 'type_name',
                   'display_size', 'precision', 'scale', 'signed', 'nullable',
                   'python_type']
        df = pd.DataFrame.from_records(records, columns=columns)
        df.attrs['column_names'] = Column.get_names(list(self._columns))
        return df
