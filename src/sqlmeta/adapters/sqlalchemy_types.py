"""
SQLAlchemy type mapping for resolved engine types.

Lets SQLAlchemy-based tooling (Table reflection, DDL generation) consume
result set metadata directly.
"""
import sqlalchemy as sa
from sqlmeta.adapters.type_mapping import ResolvedType
from sqlmeta.exceptions import InvariantViolation
from sqlmeta.types import SqlType

__all__ = ['to_sqlalchemy_type']

_simple_types = {
    SqlType.FLOAT: sa.Float,
    SqlType.DOUBLE: sa.Double,
    SqlType.REAL: sa.REAL,
    SqlType.BOOLEAN: sa.Boolean,
    SqlType.TINYINT: sa.SmallInteger,
    SqlType.SMALLINT: sa.SmallInteger,
    SqlType.INTEGER: sa.Integer,
    SqlType.BIGINT: sa.BigInteger,
    SqlType.TIMESTAMP: sa.TIMESTAMP,
    SqlType.DATE: sa.Date,
    }


def to_sqlalchemy_type(sql_type: SqlType,
                       resolved: ResolvedType | None = None) -> sa.types.TypeEngine:
    """Build a SQLAlchemy type instance for a SQL type code.

    Declared length/precision/scale from ``resolved`` are carried over;
    unbounded strings map to a plain ``String``.
    """
    length = resolved.length if resolved is not None else None

    if sql_type == SqlType.VARCHAR:
        return sa.String(length)
    if sql_type == SqlType.CHAR:
        return sa.CHAR(length)
    if sql_type in {SqlType.DECIMAL, SqlType.NUMERIC}:
        if resolved is not None and resolved.precision is not None:
            return sa.Numeric(precision=resolved.precision, scale=resolved.scale)
        return sa.Numeric()

    type_cls = _simple_types.get(sql_type)
    if type_cls is None:
        raise InvariantViolation(f'No SQLAlchemy type for {sql_type!r}')
    return type_cls()
