"""
Error taxonomy shared by services and routes.

Services raise these; the handlers registered in main.py turn them into
JSON responses of the form {"error": "<message>"}.
"""


class AppError(Exception):
    """Base class for every error the API reports to clients."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class MissingRequiredFields(ValidationError):
    default_message = "Missing required fields"


class NoFieldsToUpdate(ValidationError):
    default_message = "No fields to update"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class Misconfigured(AppError):
    default_message = "Service is not configured"


class DatabaseFailure(AppError):
    default_message = "Database error"


class StorageFailure(AppError):
    default_message = "Storage error"


class OracleFailure(AppError):
    default_message = "External AI service error"
