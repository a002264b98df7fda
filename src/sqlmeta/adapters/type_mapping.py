"""
Type resolution system for engine column types.

This module translates the engine's textual column type descriptors into the
standard SQL type model. Resolution runs in a fixed order:

1. Exact, case-insensitive lookup of scalar type keys
2. Parameterized types: ``decimal(p,s)``, ``char(n)``, ``varchar(n)``
3. Prefix match of complex types (``map<``, ``array<``, ``struct<``)
4. Configured aliases onto a built-in key

Complex types are surfaced as opaque strings and never decomposed.
"""
import datetime
import decimal
import logging
import re
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

import cachetools
from sqlmeta.config.type_mapping import TypeMappingConfig
from sqlmeta.exceptions import UnrecognizedType
from sqlmeta.options import MetadataOptions
from sqlmeta.types import BIGINT_TYPE_NAME, BOOLEAN_TYPE_NAME, CHAR_TYPE_NAME
from sqlmeta.types import DATE_TYPE_NAME, DECIMAL_TYPE_NAME, DOUBLE_TYPE_NAME
from sqlmeta.types import FLOAT_TYPE_NAME, INT_TYPE_NAME, SMALLINT_TYPE_NAME
from sqlmeta.types import STRING_TYPE_NAME, TIMESTAMP_TYPE_NAME
from sqlmeta.types import TINYINT_TYPE_NAME, VARCHAR_TYPE_NAME, SqlType

logger = logging.getLogger(__name__)

__all__ = [
    'TypeNameEntry',
    'ResolvedType',
    'TypeMapper',
    'TYPE_NAME_ENTRIES',
    'COMPLEX_TYPE_PREFIXES',
    'map_to_sql_type',
    'map_to_sql_type_name',
    'resolve_type',
    'python_type',
    'reachable_sql_types',
    'type_names_for',
]


@dataclass(frozen=True)
class TypeNameEntry:
    """One row of the raw type lookup table."""
    match_key: str
    sql_type: SqlType
    type_name: str


@dataclass(frozen=True)
class ResolvedType:
    """A raw engine type translated to the SQL type model.

    precision/scale are set for ``decimal(p[,s])`` and length for
    ``char(n)``/``varchar(n)``; all three are None when the raw type
    carries no parameters.
    """
    raw_type: str
    sql_type: SqlType
    type_name: str
    precision: int | None = None
    scale: int | None = None
    length: int | None = None

    @property
    def has_parameters(self) -> bool:
        return self.precision is not None or self.length is not None


TYPE_NAME_ENTRIES: tuple[TypeNameEntry, ...] = (
    TypeNameEntry('string', SqlType.VARCHAR, STRING_TYPE_NAME),
    TypeNameEntry('float', SqlType.FLOAT, FLOAT_TYPE_NAME),
    TypeNameEntry('double', SqlType.DOUBLE, DOUBLE_TYPE_NAME),
    TypeNameEntry('bool', SqlType.BOOLEAN, BOOLEAN_TYPE_NAME),
    TypeNameEntry('boolean', SqlType.BOOLEAN, BOOLEAN_TYPE_NAME),
    TypeNameEntry('byte', SqlType.TINYINT, TINYINT_TYPE_NAME),
    TypeNameEntry('tinyint', SqlType.TINYINT, TINYINT_TYPE_NAME),
    TypeNameEntry('smallint', SqlType.SMALLINT, SMALLINT_TYPE_NAME),
    TypeNameEntry('i32', SqlType.INTEGER, INT_TYPE_NAME),
    TypeNameEntry('int', SqlType.INTEGER, INT_TYPE_NAME),
    TypeNameEntry('i64', SqlType.BIGINT, BIGINT_TYPE_NAME),
    TypeNameEntry('bigint', SqlType.BIGINT, BIGINT_TYPE_NAME),
    TypeNameEntry('timestamp', SqlType.TIMESTAMP, TIMESTAMP_TYPE_NAME),
    TypeNameEntry('decimal', SqlType.DECIMAL, DECIMAL_TYPE_NAME),
    TypeNameEntry('date', SqlType.DATE, DATE_TYPE_NAME),
    TypeNameEntry('char', SqlType.CHAR, CHAR_TYPE_NAME),
    TypeNameEntry('varchar', SqlType.VARCHAR, VARCHAR_TYPE_NAME),
    )

_entries_by_key: Mapping[str, TypeNameEntry] = MappingProxyType({
    entry.match_key: entry for entry in TYPE_NAME_ENTRIES
    })

# Complex types are surfaced as strings
COMPLEX_TYPE_PREFIXES: tuple[str, ...] = ('map<', 'array<', 'struct<')
_complex_entry = _entries_by_key['string']

MAX_DECIMAL_PRECISION = 38
MAX_CHAR_LENGTH = 255
MAX_VARCHAR_LENGTH = 65535

_PARAMETERIZED = re.compile(
    r'(?P<base>[a-z]+)\(\s*(?P<first>[0-9]{1,10})\s*(?:,\s*(?P<second>[0-9]{1,10})\s*)?\)',
    re.IGNORECASE | re.ASCII,
    )
_PARAMETERIZED_KEYS = frozenset({'decimal', 'char', 'varchar'})

python_types: Mapping[SqlType, type] = MappingProxyType({
    SqlType.VARCHAR: str,
    SqlType.CHAR: str,
    SqlType.FLOAT: float,
    SqlType.REAL: float,
    SqlType.DOUBLE: float,
    SqlType.BOOLEAN: bool,
    SqlType.TINYINT: int,
    SqlType.SMALLINT: int,
    SqlType.INTEGER: int,
    SqlType.BIGINT: int,
    SqlType.TIMESTAMP: datetime.datetime,
    SqlType.DATE: datetime.date,
    SqlType.DECIMAL: decimal.Decimal,
    SqlType.NUMERIC: decimal.Decimal,
    })


def python_type(sql_type: SqlType) -> type:
    """Python value type for a SQL type code.
    """
    return python_types[SqlType(sql_type)]


class TypeMapper:
    """
    Resolves engine type strings to SQL type codes and canonical names.

    Resolution is a pure function of the raw type, the static lookup table
    and the configured aliases, so results are memoized in an LRU cache.
    The cache is dropped whenever the alias config changes generation.
    Concurrent first lookups of the same raw type may both compute it; the
    result is identical either way.
    """

    def __init__(self, options: MetadataOptions | None = None,
                 config: TypeMappingConfig | None = None) -> None:
        self.options = options or MetadataOptions()
        if config is None:
            if self.options.type_mapping_file:
                config = TypeMappingConfig(config_file=self.options.type_mapping_file)
            else:
                config = TypeMappingConfig.get_instance()
        self.config = config
        self._lock = threading.RLock()
        self._cache = (cachetools.LRUCache(maxsize=self.options.cache_size)
                       if self.options.cache_size else None)
        self._generation = self.config.generation

    def resolve(self, raw_type: str) -> ResolvedType:
        """Resolve a raw engine type string.

        Raises
            UnrecognizedType: no scalar key, parameterized form, complex
                prefix or alias matches the raw type
        """
        if not isinstance(raw_type, str):
            raise UnrecognizedType(raw_type, 'type must be a string')

        if self._cache is None:
            return self._resolve(raw_type)

        with self._lock:
            if self._generation != self.config.generation:
                self._cache.clear()
                self._generation = self.config.generation
                logger.debug('Type aliases changed, cleared resolution cache')
            generation = self._generation
            resolved = self._cache.get(raw_type)
        if resolved is not None:
            return resolved

        resolved = self._resolve(raw_type)
        with self._lock:
            if generation == self.config.generation:
                self._cache[raw_type] = resolved
        logger.debug(f'Cached resolution {raw_type!r} -> {resolved.sql_type.name}')
        return resolved

    def map_to_sql_type(self, raw_type: str) -> SqlType:
        return self.resolve(raw_type).sql_type

    def map_to_sql_type_name(self, raw_type: str) -> str:
        return self.resolve(raw_type).type_name

    def clear_cache(self) -> None:
        if self._cache is not None:
            with self._lock:
                self._cache.clear()

    def _resolve(self, raw_type: str) -> ResolvedType:
        entry = _entries_by_key.get(raw_type.lower())
        if entry is not None:
            return ResolvedType(raw_type, entry.sql_type, entry.type_name)

        match = _PARAMETERIZED.fullmatch(raw_type)
        if match:
            return self._resolve_parameterized(raw_type, match)

        if self._is_complex(raw_type):
            return ResolvedType(raw_type, _complex_entry.sql_type, _complex_entry.type_name)

        target = self.config.get_alias(raw_type)
        if target is not None:
            entry = _entries_by_key.get(target)
            if entry is None:
                raise UnrecognizedType(raw_type, f'alias target {target!r} is not a known type')
            logger.debug(f'Resolved alias {raw_type!r} -> {target!r}')
            return ResolvedType(raw_type, entry.sql_type, entry.type_name)

        raise UnrecognizedType(raw_type)

    def _is_complex(self, raw_type: str) -> bool:
        if self.options.case_sensitive_complex:
            return raw_type.startswith(COMPLEX_TYPE_PREFIXES)
        return raw_type.lower().startswith(COMPLEX_TYPE_PREFIXES)

    def _resolve_parameterized(self, raw_type: str, match: re.Match) -> ResolvedType:
        base = match['base'].lower()
        first = int(match['first'])
        second = match['second']
        if base not in _PARAMETERIZED_KEYS:
            raise UnrecognizedType(raw_type, f'{base!r} takes no parameters')
        entry = _entries_by_key[base]

        if entry.sql_type == SqlType.DECIMAL:
            scale = int(second) if second is not None else 0
            if not 1 <= first <= MAX_DECIMAL_PRECISION:
                raise UnrecognizedType(
                    raw_type, f'precision must be between 1 and {MAX_DECIMAL_PRECISION}')
            if scale > first:
                raise UnrecognizedType(raw_type, 'scale must not exceed precision')
            if not self.options.parse_type_parameters:
                return ResolvedType(raw_type, entry.sql_type, entry.type_name)
            return ResolvedType(raw_type, entry.sql_type, entry.type_name,
                                precision=first, scale=scale)

        if second is not None:
            raise UnrecognizedType(raw_type, f'{base!r} takes a single length')
        limit = MAX_CHAR_LENGTH if entry.sql_type == SqlType.CHAR else MAX_VARCHAR_LENGTH
        if not 1 <= first <= limit:
            raise UnrecognizedType(raw_type, f'length must be between 1 and {limit}')
        if not self.options.parse_type_parameters:
            return ResolvedType(raw_type, entry.sql_type, entry.type_name)
        return ResolvedType(raw_type, entry.sql_type, entry.type_name, length=first)


_default_mapper: TypeMapper | None = None


def _global_mapper() -> TypeMapper:
    global _default_mapper
    if _default_mapper is None:
        _default_mapper = TypeMapper()
    return _default_mapper


def resolve_type(raw_type: str) -> ResolvedType:
    """
    Central function for raw type resolution across the codebase.

    Uses a module-level TypeMapper built with default options.

    Args:
        raw_type: Engine type string (e.g. 'int', 'decimal(10,2)', 'map<string,int>')

    Returns
        ResolvedType with the SQL type code, canonical name and any parameters
    """
    return _global_mapper().resolve(raw_type)


def map_to_sql_type(raw_type: str) -> SqlType:
    """Map a raw engine type string to its SQL type code.
    """
    return resolve_type(raw_type).sql_type


def map_to_sql_type_name(raw_type: str) -> str:
    """Map a raw engine type string to its canonical SQL type name.

    Performs no column bounds checking; callers validate the ordinal
    before extracting the raw type.
    """
    return resolve_type(raw_type).type_name


def reachable_sql_types() -> frozenset[SqlType]:
    """SQL type codes the mapper can produce.
    """
    return frozenset(entry.sql_type for entry in TYPE_NAME_ENTRIES)


def type_names_for(sql_type: Any) -> list[str]:
    """Canonical names reachable for a SQL type code.
    """
    sql_type = SqlType(sql_type)
    return sorted({entry.type_name for entry in TYPE_NAME_ENTRIES
                   if entry.sql_type == sql_type})
