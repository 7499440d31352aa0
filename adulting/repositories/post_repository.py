from flask import current_app

from adulting.db import run_query
from adulting.errors import BadRequestError, NotFoundError, UnauthorizedError


RECOMMENDATION_LIMIT = 10

_OPPOSITE_REACTION = {
    "likes": "dislikes",
    "dislikes": "likes",
}


def _require_post(session, post_id):
    result = run_query(
        session,
        "SELECT id, username FROM posts WHERE id = $1",
        [post_id],
    )
    post = result.mappings().first()
    if not post:
        raise NotFoundError(f"No such post: {post_id}")
    return post


def create(session, username, title, description, type=None) -> dict:
    """Create a post owned by ``username``; id and date come from the database."""
    result = run_query(
        session,
        """INSERT INTO posts (title, description, type, username, date)
           SELECT $1, $2, $3, username, CURRENT_TIMESTAMP
           FROM users
           WHERE username = $4
           RETURNING id, title, description, type, date, username""",
        [title, description, type, username],
    )
    post = result.mappings().first()
    if not post:
        raise NotFoundError(f"No user: {username}")

    post = dict(post)
    session.commit()
    return post


def get(session, post_id) -> dict:
    result = run_query(
        session,
        """SELECT p.id,
                  p.title,
                  p.description,
                  p.type,
                  p.date,
                  u.username,
                  u.first_name,
                  u.last_name,
                  u.email
           FROM posts AS p
           JOIN users AS u ON u.username = p.username
           WHERE p.id = $1""",
        [post_id],
    )
    p = result.mappings().first()
    if not p:
        raise NotFoundError(f"No such post: {post_id}")

    return {
        "id": p["id"],
        "title": p["title"],
        "description": p["description"],
        "type": p["type"],
        "date": p["date"],
        "user": {
            "username": p["username"],
            "first_name": p["first_name"],
            "last_name": p["last_name"],
            "email": p["email"],
        },
    }


def remove(session, post_id, username) -> None:
    post = _require_post(session, post_id)
    if post["username"] != username:
        raise UnauthorizedError("Only the author can delete this post")

    run_query(session, "DELETE FROM posts WHERE id = $1", [post_id])
    session.commit()


def get_recommendations(session, username, type) -> list:
    """Usernames posting most often under ``type`` that ``username`` does not follow yet."""
    result = run_query(
        session,
        f"""SELECT username
            FROM posts
            WHERE type = $1
              AND username <> $2
              AND username NOT IN (
                  SELECT user_being_followed_id
                  FROM follows
                  WHERE user_following_id = $2
              )
            GROUP BY username
            ORDER BY COUNT(*) DESC, username
            LIMIT {RECOMMENDATION_LIMIT}""",
        [type, username],
    )
    return [row[0] for row in result]


def _react(session, table, post_id, username) -> dict:
    _require_post(session, post_id)

    existing = run_query(
        session,
        f"SELECT 1 FROM {table} WHERE username = $1 AND post_id = $2",
        [username, post_id],
    )
    if existing.first():
        raise BadRequestError(f"Post {post_id} already in {table}")

    # A user either likes or dislikes a post, never both.
    run_query(
        session,
        f"DELETE FROM {_OPPOSITE_REACTION[table]} WHERE username = $1 AND post_id = $2",
        [username, post_id],
    )
    result = run_query(
        session,
        f"""INSERT INTO {table} (username, post_id)
            SELECT username, $2
            FROM users
            WHERE username = $1
            RETURNING username, post_id""",
        [username, post_id],
    )
    reaction = result.mappings().first()
    if not reaction:
        session.rollback()
        raise NotFoundError(f"No user: {username}")

    reaction = dict(reaction)
    session.commit()
    current_app.logger.info("%s added post %s to %s", username, post_id, table)
    return reaction


def _unreact(session, table, post_id, username) -> dict:
    result = run_query(
        session,
        f"""DELETE FROM {table}
            WHERE username = $1 AND post_id = $2
            RETURNING username, post_id""",
        [username, post_id],
    )
    reaction = result.mappings().first()
    if not reaction:
        raise NotFoundError(f"Post {post_id} not in {table} of {username}")

    reaction = dict(reaction)
    session.commit()
    return reaction


def like(session, post_id, username) -> dict:
    return _react(session, "likes", post_id, username)


def dislike(session, post_id, username) -> dict:
    return _react(session, "dislikes", post_id, username)


def unlike(session, post_id, username) -> dict:
    return _unreact(session, "likes", post_id, username)


def undislike(session, post_id, username) -> dict:
    return _unreact(session, "dislikes", post_id, username)


def add_comment(session, post_id, username, text) -> dict:
    _require_post(session, post_id)

    result = run_query(
        session,
        """INSERT INTO comments (text, username, post_id, date)
           SELECT $1, username, $3, CURRENT_TIMESTAMP
           FROM users
           WHERE username = $2
           RETURNING id, text, username, post_id, date""",
        [text, username, post_id],
    )
    comment = result.mappings().first()
    if not comment:
        raise NotFoundError(f"No user: {username}")

    comment = dict(comment)
    session.commit()
    return comment


def get_comments(session, post_id) -> list:
    _require_post(session, post_id)

    result = run_query(
        session,
        """SELECT id, text, username, post_id, date
           FROM comments
           WHERE post_id = $1
           ORDER BY id""",
        [post_id],
    )
    return [dict(row) for row in result.mappings()]
