"""
Display size, precision, scale and signedness per SQL type code.

Values come from a static table keyed by SqlType. When a ResolvedType with
parsed parameters is supplied (``decimal(p,s)``, ``char(n)``, ``varchar(n)``)
the declared values take precedence over the table.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from sqlmeta.adapters.type_mapping import ResolvedType
from sqlmeta.exceptions import InvariantViolation
from sqlmeta.types import MAX_SIZE, SqlType

logger = logging.getLogger(__name__)

__all__ = [
    'ColumnAttributes',
    'COLUMN_ATTRIBUTES',
    'SIGNED_TYPES',
    'column_attributes',
    'column_display_size',
    'column_precision',
    'column_scale',
    'is_signed',
]


@dataclass(frozen=True)
class ColumnAttributes:
    display_size: int
    precision: int
    scale: int


COLUMN_ATTRIBUTES: Mapping[SqlType, ColumnAttributes] = MappingProxyType({
    # wide enough for "false"
    SqlType.BOOLEAN: ColumnAttributes(display_size=5, precision=1, scale=0),
    SqlType.VARCHAR: ColumnAttributes(display_size=MAX_SIZE, precision=MAX_SIZE, scale=0),
    SqlType.CHAR: ColumnAttributes(display_size=255, precision=255, scale=0),
    # integer widths are digit count plus one for the sign
    SqlType.TINYINT: ColumnAttributes(display_size=4, precision=3, scale=0),
    SqlType.SMALLINT: ColumnAttributes(display_size=6, precision=5, scale=0),
    SqlType.INTEGER: ColumnAttributes(display_size=11, precision=10, scale=0),
    SqlType.BIGINT: ColumnAttributes(display_size=20, precision=19, scale=0),
    # e.g. -(17#).e-###
    SqlType.FLOAT: ColumnAttributes(display_size=24, precision=7, scale=7),
    # e.g. -(17#).e-####
    SqlType.DOUBLE: ColumnAttributes(display_size=25, precision=15, scale=15),
    # yyyy-mm-dd hh:mm:ss.fffffffff
    SqlType.TIMESTAMP: ColumnAttributes(display_size=29, precision=29, scale=9),
    SqlType.DATE: ColumnAttributes(display_size=10, precision=10, scale=0),
    SqlType.DECIMAL: ColumnAttributes(display_size=MAX_SIZE, precision=MAX_SIZE, scale=MAX_SIZE),
    })

SIGNED_TYPES: frozenset[SqlType] = frozenset({
    SqlType.DOUBLE,
    SqlType.DECIMAL,
    SqlType.FLOAT,
    SqlType.INTEGER,
    SqlType.REAL,
    SqlType.SMALLINT,
    SqlType.TINYINT,
    SqlType.BIGINT,
    })


def _declared_attributes(resolved: ResolvedType) -> ColumnAttributes | None:
    if resolved.precision is not None:
        # sign and decimal point
        return ColumnAttributes(display_size=resolved.precision + 2,
                                precision=resolved.precision,
                                scale=resolved.scale or 0)
    if resolved.length is not None:
        return ColumnAttributes(display_size=resolved.length,
                                precision=resolved.length,
                                scale=0)
    return None


def column_attributes(sql_type: SqlType,
                      resolved: ResolvedType | None = None) -> ColumnAttributes:
    """Look up display size, precision and scale for a SQL type code.

    Args:
        sql_type: SQL type code produced by the type mapper
        resolved: Optional resolved raw type carrying declared parameters

    Returns
        ColumnAttributes for the type

    Raises
        InvariantViolation: the code has no attribute entry. The type mapper
            never produces such a code.
    """
    if resolved is not None and resolved.has_parameters:
        if resolved.sql_type != sql_type:
            raise InvariantViolation(
                f'Resolved type {resolved.sql_type!r} does not match {sql_type!r}')
        return _declared_attributes(resolved)

    try:
        return COLUMN_ATTRIBUTES[sql_type]
    except KeyError:
        logger.error(f'No column attributes for SQL type {sql_type!r}')
        raise InvariantViolation(f'Invalid column type: {sql_type!r}') from None


def column_display_size(sql_type: SqlType, resolved: ResolvedType | None = None) -> int:
    return column_attributes(sql_type, resolved).display_size


def column_precision(sql_type: SqlType, resolved: ResolvedType | None = None) -> int:
    return column_attributes(sql_type, resolved).precision


def column_scale(sql_type: SqlType, resolved: ResolvedType | None = None) -> int:
    return column_attributes(sql_type, resolved).scale


def is_signed(sql_type: SqlType) -> bool:
    """Returns True if values of the type are signed numbers.

    Non-numeric types (strings, boolean, timestamp, complex types surfaced
    as strings) are never signed.
    """
    return sql_type in SIGNED_TYPES
