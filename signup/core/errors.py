from __future__ import annotations


class RegistrationError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class DuplicateAccountError(RegistrationError):
    def __init__(self, message: str = "User already exists"):
        super().__init__(message, status_code=400)


class AccountWriteError(RegistrationError):
    def __init__(self, message: str = "Failed to create user"):
        super().__init__(message, status_code=500)
