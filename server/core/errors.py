# server/core/errors.py


class AccountError(Exception):
    """Base class for sign-up and log-in failures."""


class EmptyUsername(AccountError):
    def __init__(self):
        super().__init__("Username cannot be empty")


class UsernameTaken(AccountError):
    def __init__(self, username: str):
        super().__init__(f"Username '{username}' already exists")
        self.username = username


class InvalidCredentials(AccountError):
    def __init__(self):
        super().__init__("Incorrect username or password")


class StoreError(AccountError):
    """The credential store could not complete a write."""
