from flask import current_app

from adulting.db import run_query
from adulting.errors import BadRequestError, NotFoundError
from adulting.utils.security import hash_password
from adulting.utils.sql import sql_for_partial_update


UPDATE_COLUMNS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "imageUrl": "image_url",
}


def _post_summary(row) -> dict:
    return {
        "id": row["id"],
        "title": row["title"],
        "type": row["type"],
        "description": row["description"],
        "date": row["date"],
        "user": {
            "username": row["username"],
            "first_name": row["first_name"],
            "last_name": row["last_name"],
            "email": row["email"],
        },
    }


def exists(session, username: str) -> bool:
    result = run_query(
        session,
        "SELECT username FROM users WHERE username = $1",
        [username],
    )
    return result.first() is not None


def get_with_password(session, username: str):
    """Return the user row including the password hash, or None."""
    result = run_query(
        session,
        """SELECT username,
                  password,
                  first_name,
                  last_name,
                  email
           FROM users
           WHERE username = $1""",
        [username],
    )
    row = result.mappings().first()
    return dict(row) if row else None


def create_user(session, username, password_hash, first_name, last_name, email):
    result = run_query(
        session,
        """INSERT INTO users
               (username, password, first_name, last_name, email)
           VALUES ($1, $2, $3, $4, $5)
           RETURNING username, first_name, last_name, email""",
        [username, password_hash, first_name, last_name, email],
    )
    user = dict(result.mappings().first())
    session.commit()
    return user


def get(session, username: str) -> dict:
    """Return the user's profile and the ids of the posts they own.

    Raises NotFoundError if there is no such user.
    """
    result = run_query(
        session,
        """SELECT username,
                  first_name,
                  last_name,
                  email,
                  bio,
                  image_url
           FROM users
           WHERE username = $1""",
        [username],
    )
    row = result.mappings().first()
    if not row:
        raise NotFoundError(f"No user: {username}")

    user = dict(row)
    post_ids = run_query(
        session,
        "SELECT id FROM posts WHERE username = $1 ORDER BY id",
        [username],
    )
    user["posts"] = [r[0] for r in post_ids]
    return user


def user_posts(session, username: str) -> list:
    result = run_query(
        session,
        """SELECT p.id,
                  p.title,
                  p.type,
                  p.description,
                  p.date,
                  u.username,
                  u.first_name,
                  u.last_name,
                  u.email
           FROM posts AS p
           JOIN users AS u ON p.username = u.username
           WHERE p.username = $1
           ORDER BY p.id""",
        [username],
    )
    return [_post_summary(row) for row in result.mappings()]


def _reacted_posts(session, table: str, username: str) -> list:
    # The reaction row belongs to the reacting user; the nested profile is
    # the post owner's.
    result = run_query(
        session,
        f"""SELECT p.id,
                   p.title,
                   p.type,
                   p.description,
                   p.date,
                   u.username,
                   u.first_name,
                   u.last_name,
                   u.email
            FROM {table} AS r
            JOIN posts AS p ON r.post_id = p.id
            JOIN users AS u ON p.username = u.username
            WHERE r.username = $1
            ORDER BY p.id""",
        [username],
    )
    return [_post_summary(row) for row in result.mappings()]


def user_likes(session, username: str) -> list:
    return _reacted_posts(session, "likes", username)


def user_dislikes(session, username: str) -> list:
    return _reacted_posts(session, "dislikes", username)


def get_frequent_post_types(session, username: str) -> list:
    result = run_query(
        session,
        """SELECT type
           FROM posts
           WHERE username = $1 AND type IS NOT NULL
           GROUP BY type
           ORDER BY COUNT(*) DESC, type""",
        [username],
    )
    return [row[0] for row in result]


def get_followers(session, username: str) -> set:
    result = run_query(
        session,
        """SELECT user_following_id
           FROM follows
           WHERE user_being_followed_id = $1""",
        [username],
    )
    return {row[0] for row in result}


def get_following(session, username: str) -> set:
    result = run_query(
        session,
        """SELECT user_being_followed_id
           FROM follows
           WHERE user_following_id = $1""",
        [username],
    )
    return {row[0] for row in result}


def is_following(session, follower: str, followed: str) -> bool:
    result = run_query(
        session,
        """SELECT 1
           FROM follows
           WHERE user_following_id = $1 AND user_being_followed_id = $2""",
        [follower, followed],
    )
    return result.first() is not None


def add_follow(session, follower: str, followed: str) -> dict:
    """Record that ``follower`` follows ``followed``.

    Raises BadRequestError for a self-follow or an existing pair and
    NotFoundError when either user does not exist.
    """
    if follower == followed:
        raise BadRequestError("You cannot follow yourself")
    if not exists(session, follower):
        raise NotFoundError(f"No user: {follower}")
    if is_following(session, follower, followed):
        raise BadRequestError(f"Already following: {followed}")

    # Selecting the followed user makes the insert return nothing for an
    # unknown username.
    result = run_query(
        session,
        """INSERT INTO follows (user_following_id, user_being_followed_id)
           SELECT $1, username
           FROM users
           WHERE username = $2
           RETURNING user_following_id, user_being_followed_id""",
        [follower, followed],
    )
    follow = result.mappings().first()
    if not follow:
        raise NotFoundError(f"No such user: {followed}")

    follow = dict(follow)
    session.commit()
    current_app.logger.info("%s followed %s", follower, followed)
    return follow


def remove_follow(session, follower: str, followed: str) -> dict:
    result = run_query(
        session,
        """DELETE FROM follows
           WHERE user_following_id = $1 AND user_being_followed_id = $2
           RETURNING user_following_id, user_being_followed_id""",
        [follower, followed],
    )
    follow = result.mappings().first()
    if not follow:
        raise NotFoundError(f"Not following: {followed}")

    follow = dict(follow)
    session.commit()
    current_app.logger.info("%s unfollowed %s", follower, followed)
    return follow


def update(session, username: str, data: dict) -> dict:
    """Partial update; only the given fields change.

    ``data`` may contain firstName, lastName, email, password, bio and
    imageUrl. A new password is hashed before it is stored.
    """
    data = dict(data)
    if "password" in data:
        data["password"] = hash_password(data["password"])

    set_cols, values = sql_for_partial_update(data, UPDATE_COLUMNS)
    username_idx = f"${len(values) + 1}"

    result = run_query(
        session,
        f"""UPDATE users
            SET {set_cols}
            WHERE username = {username_idx}
            RETURNING username, first_name, last_name, email, bio, image_url""",
        [*values, username],
    )
    user = result.mappings().first()
    if not user:
        raise NotFoundError(f"No user: {username}")

    user = dict(user)
    session.commit()
    return user


def remove(session, username: str) -> None:
    result = run_query(
        session,
        "DELETE FROM users WHERE username = $1 RETURNING username",
        [username],
    )
    if not result.first():
        raise NotFoundError(f"No user: {username}")

    session.commit()
    current_app.logger.info("Removed user %s", username)
