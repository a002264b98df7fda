"""
Metadata translation exception classes.
"""


class MetadataError(Exception):
    """Base class for all sqlmeta errors.
    """


class UnrecognizedType(MetadataError, ValueError):
    """Raw engine type string matches no known type.
    """

    def __init__(self, raw_type: str, reason: str | None = None) -> None:
        self.raw_type = raw_type
        self.reason = reason
        message = f'Unrecognized column type: {raw_type}'
        if reason:
            message = f'{message} ({reason})'
        super().__init__(message)


class InvalidColumn(MetadataError, IndexError):
    """Column ordinal outside of [1, count].
    """

    def __init__(self, ordinal: int, count: int) -> None:
        self.ordinal = ordinal
        self.count = count
        super().__init__(f'Invalid column value: {ordinal} (expected 1..{count})')


class MissingTypeInfo(MetadataError):
    """Result set carries no column type list.
    """

    def __init__(self, message: str = 'Could not determine column type name for ResultSet') -> None:
        super().__init__(message)


class UnsupportedFacet(MetadataError, NotImplementedError):
    """Metadata facet with no engine equivalent.
    """

    def __init__(self, facet: str) -> None:
        self.facet = facet
        super().__init__(f'Method not supported: {facet}')


class InvariantViolation(MetadataError, LookupError):
    """Internal error: a SQL type code has no attribute entry.
    """


ContractError = (
    InvalidColumn,
    MissingTypeInfo,
    )

TranslationError = (
    UnrecognizedType,
    InvariantViolation,
    )
