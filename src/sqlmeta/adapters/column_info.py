"""
Column descriptors for result set metadata.
"""
import logging
from dataclasses import dataclass
from typing import Any, Self

from sqlmeta.adapters.type_mapping import ResolvedType, TypeMapper, resolve_type

logger = logging.getLogger(__name__)

__all__ = ['Column']


@dataclass(frozen=True)
class Column:
    """Name and raw engine type of one result set column

    Immutable once the result set metadata is built. The raw type is kept
    verbatim; translation to the SQL type model happens on demand through
    a TypeMapper.
    """
    name: str
    raw_type: str | None = None

    def resolve(self, mapper: TypeMapper | None = None) -> ResolvedType:
        """Resolve the raw type through ``mapper`` (module default if None).
        """
        if mapper is None:
            return resolve_type(self.raw_type)
        return mapper.resolve(self.raw_type)

    def to_dict(self) -> dict[str, Any]:
        return {'name': self.name, 'raw_type': self.raw_type}

    @classmethod
    def from_lists(cls, names: list[str], raw_types: list[str] | None) -> list[Self]:
        """Pair column names with raw types by position.

        When ``raw_types`` is None every column gets ``raw_type=None``.

        Raises
            ValueError: names and raw types differ in length
        """
        if raw_types is None:
            return [cls(name=name) for name in names]
        if len(names) != len(raw_types):
            raise ValueError(f'Column name/type count mismatch: {len(names)} names, '
                             f'{len(raw_types)} types')
        logger.debug(f'Built {len(names)} column descriptors')
        return [cls(name=name, raw_type=raw_type)
                for name, raw_type in zip(names, raw_types)]

    @staticmethod
    def get_names(columns: list[Self]) -> list[str]:
        """Get column names from a list of Column objects.
        """
        return [col.name for col in columns]
