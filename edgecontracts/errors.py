"""Errors raised when a contract model fails validation."""


class ContractInvalidError(ValueError):
    """Raised when a model does not satisfy its contract."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message