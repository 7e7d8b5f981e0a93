"""User data access: registration and credential checks."""

from sqlalchemy import exists
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from snippetbox.models.user import EMAIL_CONSTRAINT, User
from snippetbox.services.auth import get_password_hash, verify_password
from snippetbox.services.errors import DuplicateEmailError, InvalidCredentialsError

# PostgreSQL SQLSTATE for unique_violation
PG_UNIQUE_VIOLATION = "23505"
SQLITE_UNIQUE_VIOLATION = "SQLITE_CONSTRAINT_UNIQUE"


def is_duplicate_email(exc: IntegrityError) -> bool:
    """Tell whether an integrity error is the users.email unique constraint firing."""
    orig = exc.orig
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate == PG_UNIQUE_VIOLATION:
        diag = getattr(orig, "diag", None)
        return getattr(diag, "constraint_name", None) == EMAIL_CONSTRAINT
    if getattr(orig, "sqlite_errorname", None) == SQLITE_UNIQUE_VIOLATION:
        return "users.email" in str(orig)
    return False


class UserService:
    """Service for user records."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, name: str, email: str, password: str) -> None:
        """Create a user with a bcrypt-hashed password.

        Raises:
            DuplicateEmailError: the email is already taken.
        """
        user = User(name=name, email=email, hashed_password=get_password_hash(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if is_duplicate_email(exc):
                raise DuplicateEmailError() from exc
            raise

    def authenticate(self, email: str, password: str) -> int:
        """Return the id of the user owning these credentials.

        An unknown email returns before any hash is computed, so that path
        is faster than a wrong password.

        Raises:
            InvalidCredentialsError: unknown email or wrong password.
        """
        row = self.db.query(User.id, User.hashed_password).filter(User.email == email).first()
        if row is None:
            raise InvalidCredentialsError()

        user_id, hashed_password = row
        if not verify_password(password, hashed_password):
            raise InvalidCredentialsError()
        return user_id

    def exists(self, user_id: int) -> bool:
        """Check whether a user with this id exists."""
        return bool(self.db.query(exists().where(User.id == user_id)).scalar())
