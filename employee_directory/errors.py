# employee_directory/errors.py
"""Error taxonomy; each error knows the HTTP status it is answered with."""


class DirectoryError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DirectoryError):
    """Client input is malformed. Carries every violated rule as its own message."""

    status_code = 400

    def __init__(self, messages: list[str]):
        super().__init__("; ".join(messages))
        self.messages = list(messages)


class DuplicateKey(DirectoryError):
    status_code = 409

    def __init__(self, nirc: str):
        super().__init__("Employee with that NIRC already exists")
        self.nirc = nirc


class UnsupportedMediaType(DirectoryError):
    status_code = 415

    def __init__(self, message: str = "Content-Type must be application/json"):
        super().__init__(message)


class StorageError(DirectoryError):
    """Persistence failure. `message` is safe to return; `cause` is only logged."""

    status_code = 500

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class StorageUnavailable(StorageError):
    pass
