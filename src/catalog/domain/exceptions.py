"""Domain exceptions."""


class CatalogError(Exception):
    """Base exception for the catalog service."""

    pass


class MalformedInput(CatalogError):
    """Request body could not be decoded into the expected shape."""

    pass


class InvalidIdentifier(CatalogError):
    """Identifier is not a valid book identity."""

    pass


class NotFound(CatalogError):
    """Requested resource was not found."""

    pass


class StoreError(CatalogError):
    """Document store call failed or timed out."""

    pass
