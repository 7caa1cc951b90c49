"""Base exception class for all catfact-specific errors."""


class CatFactError(Exception):
    """Base class for all catfact errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
