"""
SQL type codes and canonical type names.

The numeric values of SqlType follow the standard cross-language SQL type
constants (the java.sql.Types numbering) so that generic SQL tooling can
consume them without a further translation step.
"""
from enum import IntEnum

__all__ = [
    'SqlType',
    'Nullability',
    'STRING_TYPE_NAME',
    'FLOAT_TYPE_NAME',
    'DOUBLE_TYPE_NAME',
    'BOOLEAN_TYPE_NAME',
    'TINYINT_TYPE_NAME',
    'SMALLINT_TYPE_NAME',
    'INT_TYPE_NAME',
    'BIGINT_TYPE_NAME',
    'TIMESTAMP_TYPE_NAME',
    'DECIMAL_TYPE_NAME',
    'DATE_TYPE_NAME',
    'CHAR_TYPE_NAME',
    'VARCHAR_TYPE_NAME',
    'MAX_SIZE',
]


class SqlType(IntEnum):
    """Standard SQL type codes.
    """
    TINYINT = -6
    BIGINT = -5
    CHAR = 1
    NUMERIC = 2
    DECIMAL = 3
    INTEGER = 4
    SMALLINT = 5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    VARCHAR = 12
    BOOLEAN = 16
    DATE = 91
    TIMESTAMP = 93


class Nullability(IntEnum):
    """Column nullability as reported by result set metadata.
    """
    NO_NULLS = 0
    NULLABLE = 1
    UNKNOWN = 2


STRING_TYPE_NAME = 'STRING'
FLOAT_TYPE_NAME = 'FLOAT'
DOUBLE_TYPE_NAME = 'DOUBLE'
BOOLEAN_TYPE_NAME = 'BOOLEAN'
TINYINT_TYPE_NAME = 'TINYINT'
SMALLINT_TYPE_NAME = 'SMALLINT'
INT_TYPE_NAME = 'INT'
BIGINT_TYPE_NAME = 'BIGINT'
TIMESTAMP_TYPE_NAME = 'TIMESTAMP'
DECIMAL_TYPE_NAME = 'DECIMAL'
DATE_TYPE_NAME = 'DATE'
CHAR_TYPE_NAME = 'CHAR'
VARCHAR_TYPE_NAME = 'VARCHAR'

# Engine strings have no length limit
MAX_SIZE = 2**31 - 1
