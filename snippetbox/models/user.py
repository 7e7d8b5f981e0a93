"""User model."""

from sqlalchemy import Column, Integer, String, UniqueConstraint

from snippetbox.database import Base
from snippetbox.models.mixins import CreatedMixin

# Name of the unique constraint on users.email, matched when translating
# integrity errors into DuplicateEmailError.
EMAIL_CONSTRAINT = "users_uc_email"


class User(Base, CreatedMixin):
    """Registered user. Only a bcrypt hash of the password is stored."""

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name=EMAIL_CONSTRAINT),)

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    hashed_password = Column(String(60), nullable=False)
