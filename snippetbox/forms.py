"""Form variants for the create, signup and login pages.

A form holds the raw submitted values and, after `validate()`, a mapping
from field name to a message describing what is wrong with it. An empty
mapping means the form is valid.
"""

from dataclasses import dataclass, field

from snippetbox.services.auth import BCRYPT_MAX_BYTES
from snippetbox.validator import (
    EMAIL_RX,
    matches,
    max_bytes,
    max_chars,
    min_chars,
    not_blank,
    permitted_value,
)

EXPIRY_CHOICES = (1, 7, 365)
DEFAULT_EXPIRY_DAYS = 365
TITLE_MAX_CHARS = 100
PASSWORD_MIN_CHARS = 8


@dataclass
class SnippetCreateForm:
    title: str = ""
    content: str = ""
    expires: int = DEFAULT_EXPIRY_DAYS
    problems: dict[str, str] = field(default_factory=dict)

    def validate(self) -> dict[str, str]:
        self.problems = {}

        if not not_blank(self.title):
            self.problems["title"] = "Title field cannot be blank"
        elif not max_chars(self.title, TITLE_MAX_CHARS):
            self.problems["title"] = f"Title field cannot be more than {TITLE_MAX_CHARS} characters long"

        if not not_blank(self.content):
            self.problems["content"] = "Content field cannot be blank"

        if not permitted_value(self.expires, *EXPIRY_CHOICES):
            self.problems["expires"] = "Expires field must equal 1, 7 or 365"

        return self.problems


@dataclass
class UserSignupForm:
    name: str = ""
    email: str = ""
    password: str = ""
    problems: dict[str, str] = field(default_factory=dict)

    def validate(self) -> dict[str, str]:
        self.problems = {}

        if not not_blank(self.name):
            self.problems["name"] = "Name field cannot be blank"

        if not not_blank(self.email):
            self.problems["email"] = "Email field cannot be blank"
        elif not matches(self.email, EMAIL_RX):
            self.problems["email"] = "Provided email has invalid format"

        if not not_blank(self.password):
            self.problems["password"] = "Password field cannot be blank"
        elif not min_chars(self.password, PASSWORD_MIN_CHARS):
            self.problems["password"] = (
                f"Password must be at least {PASSWORD_MIN_CHARS} characters long"
            )
        elif not max_bytes(self.password, BCRYPT_MAX_BYTES):
            self.problems["password"] = (
                f"Password cannot be longer than {BCRYPT_MAX_BYTES} bytes"
            )

        return self.problems


@dataclass
class UserLoginForm:
    email: str = ""
    password: str = ""
    problems: dict[str, str] = field(default_factory=dict)
    # Messages not tied to a single field, e.g. rejected credentials.
    non_field_problems: list[str] = field(default_factory=list)

    def validate(self) -> dict[str, str]:
        self.problems = {}

        if not not_blank(self.email):
            self.problems["email"] = "Email field cannot be blank"
        elif not matches(self.email, EMAIL_RX):
            self.problems["email"] = "Provided email has invalid format"

        if not not_blank(self.password):
            self.problems["password"] = "Password field cannot be blank"

        return self.problems
