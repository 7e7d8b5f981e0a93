"""Domain errors raised by the data-access layer.

Handlers branch on these explicitly. Anything else coming out of a service
is an unexpected fault.
"""


class ModelError(Exception):
    """Base class for named data-access outcomes."""

    message = "model error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class NoRecordError(ModelError):
    """No visible record matches: either it never existed or it has expired."""

    message = "no matching record found"


class DuplicateEmailError(ModelError):
    """The email address is already registered to another user."""

    message = "duplicate email"


class InvalidCredentialsError(ModelError):
    """Email unknown or password wrong. The two cases are deliberately merged."""

    message = "invalid credentials"
