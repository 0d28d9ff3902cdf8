"""Error taxonomy for the catalog service.

Every externally triggerable failure ends up as one of three kinds:
a validation error (400), an unknown game (404) or a backend failure (500).
"""
from typing import Any, List, Optional


class CatalogError(Exception):
    """Base exception for catalog errors."""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[dict] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "code": self.code,
            "details": self.details,
        }


class GameValidationError(CatalogError):
    """Raised when a submitted game fails one or more field rules."""

    status_code = 400

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(
            message=self.errors[0] if self.errors else "Invalid game",
            code="VALIDATION_ERROR",
            details={"errors": self.errors},
        )


class GameNotFoundError(CatalogError):
    """Raised when a game id is unknown or cannot be parsed."""

    status_code = 404

    def __init__(self, game_id: Any):
        super().__init__(
            message="Game not found",
            code="GAME_NOT_FOUND",
            details={"game_id": str(game_id)},
        )


class BackendError(CatalogError):
    """Persistence or file system failure."""

    status_code = 500


class StorageUnavailableError(BackendError):
    def __init__(self, operation: str, reason: str):
        super().__init__(
            message=f"Game store unavailable during {operation}",
            code="STORAGE_UNAVAILABLE",
            details={"operation": operation, "reason": reason},
        )


class FileIntakeError(BackendError):
    def __init__(self, filename: str, reason: str):
        super().__init__(
            message=f"Could not store image '{filename}'",
            code="FILE_INTAKE_FAILED",
            details={"filename": filename, "reason": reason},
        )
