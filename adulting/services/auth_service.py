from flask import current_app
from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError

from adulting.errors import BadRequestError, UnauthorizedError
from adulting.repositories import user_repository
from adulting.utils.security import hash_password, verify_password


def authenticate(session, username, password):
    """Return the public profile of ``username`` if ``password`` matches.

    Raises UnauthorizedError for an unknown user or a wrong password.
    """
    user = user_repository.get_with_password(session, username)

    if user and verify_password(user["password"], password):
        del user["password"]
        return user

    current_app.logger.info("Failed login for %s", username)
    raise UnauthorizedError("Invalid username/password")


def register(session, username, password, first_name, last_name, email):
    if user_repository.exists(session, username):
        raise BadRequestError(f"Duplicate username: {username}")

    try:
        user = user_repository.create_user(
            session,
            username=username,
            password_hash=hash_password(password),
            first_name=first_name,
            last_name=last_name,
            email=email,
        )
    except IntegrityError:
        # Another registration took the name after the check above.
        session.rollback()
        raise BadRequestError(f"Duplicate username: {username}")

    current_app.logger.info("Registered user %s", username)
    return user


def create_token(user):
    return create_access_token(identity=user["username"])
