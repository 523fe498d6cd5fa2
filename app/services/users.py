"""Credential store: user registration, credential verification, and account maintenance."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationFailedError
from app.core.security import hash_password, is_password_hash, verify_password
from app.models import MAX_DB_INT, Destination, User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."
EMAIL_TAKEN_MESSAGE = "Email is already registered."


def get_user(db: Session, user_id: int) -> User:
    """Return the user with this id or raise NotFoundError."""
    user = db.get(User, user_id) if 0 < user_id <= MAX_DB_INT else None
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def hash_and_store(user: User, plain_password: str) -> None:
    """
    Hash plain_password and set it on user. The only place password_hash is written.

    A value that is already a bcrypt hash is refused rather than hashed again.
    """
    if is_password_hash(plain_password):
        raise ValidationFailedError("Password must not be a bcrypt hash")
    user.password_hash = hash_password(plain_password)


def register(db: Session, email: str, password: str, name: str) -> User:
    """
    Create a user with a hashed password.

    Raises ConflictError when the email is taken, including when a concurrent
    registration wins the race and the unique index rejects this insert.
    """
    email = email.strip().lower()
    if get_user_by_email(db, email) is not None:
        raise ConflictError(EMAIL_TAKEN_MESSAGE)

    user = User(email=email, name=name)
    hash_and_store(user, password)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(EMAIL_TAKEN_MESSAGE) from e
    db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return user


def verify(db: Session, email: str, password: str) -> User:
    """
    Return the user if email and password match.

    Unknown email and wrong password raise the same UnauthorizedError so that
    callers cannot tell which accounts exist.
    """
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt")
        raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)
    return user


def update_user(
    db: Session,
    user: User,
    name: str | None = None,
    password: str | None = None,
) -> User:
    """Partial update; a new password is always re-hashed before it is stored."""
    if name is not None:
        user.name = name
    if password is not None:
        hash_and_store(user, password)
    db.commit()
    db.refresh(user)
    logger.info("Updated user id=%s (password_changed=%s)", user.id, password is not None)
    return user


def delete_user(db: Session, user_id: int) -> int:
    """
    Delete a user and every destination they own. Returns the number of
    destinations removed. Destinations are deleted explicitly so the cascade
    holds even where the store does not enforce foreign keys.
    """
    user = get_user(db, user_id)
    removed = (
        db.query(Destination)
        .filter(Destination.user_id == user.id)
        .delete(synchronize_session=False)
    )
    # Loaded destination rows (and the user's collection) are stale after the bulk delete.
    db.expire_all()
    db.delete(user)
    db.commit()
    logger.info("Deleted user id=%s and %s destination(s)", user_id, removed)
    return removed
