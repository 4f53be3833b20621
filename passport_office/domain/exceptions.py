"""Domain-specific exceptions. Pure domain layer, no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainValidationError(DomainError):
    """Raised when domain validation rules are violated."""


class InvalidPassportDataError(DomainValidationError):
    """Raised when a passport field fails its format or date rule during construction."""


class PassportRevokedError(DomainError):
    """Raised when a stamp is appended to a passport that has been revoked."""
