"""Domain exceptions for the shop catalog.

These map to consistent HTTP responses when handled by the global exception handler.
"""


class CatalogError(Exception):
    """Base exception for shop catalog errors."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 500,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail or message


class CatalogNotReadyError(CatalogError):
    """Raised when the catalog browser or a dependency is not initialized."""

    def __init__(self, message: str = "Catalog not initialized", detail: str | None = None) -> None:
        super().__init__(message, status_code=503, detail=detail or message)


class FilterStorageError(CatalogError):
    """Raised by a filter state store when the backend fails or holds an undecodable value."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message, status_code=503, detail=detail or message)


class CatalogSourceError(CatalogError):
    """Raised when catalog data cannot be loaded."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message, status_code=502, detail=detail or message)
