from typing import Any


class ServiceError(Exception):
    """Base for errors that map onto a single HTTP response.

    `code` is the short machine-readable reason sent to the client.
    """
    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_output(self, include_detail: bool = False) -> dict[str, Any]:
        data: dict[str, Any] = {"error": self.code, "message": self.message}
        if include_detail and self.detail:
            data["detail"] = self.detail
        return data


class InvalidInput(ServiceError):
    status_code = 400
    code = "invalid_input"


class NotFound(ServiceError):
    status_code = 404
    code = "not_found"


class DataStoreFailure(ServiceError):
    status_code = 500
    code = "internal_error"
