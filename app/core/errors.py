class ServiceError(Exception):
    """Error that is rendered to the client as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInputError(ServiceError):
    status_code = 400


class ConflictError(ServiceError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class StorageError(ServiceError):
    """Unexpected failure of the persistent store.

    ``action`` describes what was being done ("creating the admin"); the
    client only ever sees the generic message built from it.
    """

    status_code = 500

    def __init__(self, action: str) -> None:
        super().__init__(f"Server error occurred while {action}.")
        self.action = action
