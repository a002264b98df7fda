"""
Type translation adapters.

This package provides the following components:

- type_mapping: Raw engine type string -> SQL type code and canonical name
- type_attributes: Display size, precision, scale and signedness per SQL type
- column_info: Immutable column descriptors
- sqlalchemy_types: SQL type code -> SQLAlchemy type instance

All translation is pure; the static tables are built once at import and
never mutated.
"""
from sqlmeta.adapters.column_info import *
from sqlmeta.adapters.sqlalchemy_types import *
from sqlmeta.adapters.type_attributes import *
from sqlmeta.adapters.type_mapping import *
