from functools import wraps

from flask_jwt_extended import get_jwt_identity, jwt_required

from adulting.errors import UnauthorizedError


def ensure_same_user(view):
    """Require a valid token whose identity matches the ``username`` in the URL."""

    @wraps(view)
    @jwt_required()
    def wrapper(*args, **kwargs):
        if get_jwt_identity() != kwargs.get("username"):
            raise UnauthorizedError()
        return view(*args, **kwargs)

    return wrapper
