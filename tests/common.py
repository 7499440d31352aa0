import os
import tempfile
import unittest

from adulting import create_app
from adulting.db import db, run_query
from adulting.utils.security import hash_password


TEST_CONFIG = {
    "TESTING": True,
    "JWT_SECRET_KEY": "test-secret-key-that-is-long-enough",
    "PASSWORD_HASH_METHOD": "pbkdf2:sha256:1000",
    "LOG_LEVEL": "WARNING",
}

PASSWORDS = {
    "u1": "password1",
    "u2": "password2",
    "u3": "password3",
}

# (title, username, description, type)
POSTS = [
    ("t1", "u1", "Desc1", "finance"),
    ("t2", "u1", "Desc2", "finance"),
    ("t3", "u1", "Desc3", "cooking"),
    ("t4", "u2", "Desc4", "finance"),
    ("t5", "u2", "Desc5", "cooking"),
    ("t6", "u2", "Desc6", "cooking"),
    ("t7", "u3", "Desc7", "finance"),
    ("t8", "u3", "Desc8", "finance"),
]


class AppTestCase(unittest.TestCase):
    """Fresh schema and seed data for every test, on a temporary SQLite file."""

    @classmethod
    def setUpClass(cls):
        db_fd, cls.db_path = tempfile.mkstemp(suffix=".db")
        os.close(db_fd)

        cls.app = create_app(
            {**TEST_CONFIG, "SQLALCHEMY_DATABASE_URI": f"sqlite:///{cls.db_path}"}
        )
        cls.client = cls.app.test_client()

    @classmethod
    def tearDownClass(cls):
        with cls.app.app_context():
            db.engine.dispose()
        if os.path.exists(cls.db_path):
            os.remove(cls.db_path)

    def setUp(self):
        self.ctx = self.app.app_context()
        self.ctx.push()
        db.drop_all()
        db.create_all()
        self.session = db.session
        self._seed()

    def tearDown(self):
        db.session.remove()
        self.ctx.pop()

    def _seed(self):
        for username, password in PASSWORDS.items():
            run_query(
                self.session,
                """INSERT INTO users
                       (username, password, first_name, last_name, email, bio, image_url)
                   VALUES ($1, $2, $3, $4, $5, $6, $7)""",
                [
                    username,
                    hash_password(password),
                    f"{username.upper()}F",
                    f"{username.upper()}L",
                    f"{username}@email.com",
                    f"{username} bio",
                    f"http://{username}.img/url.jpg",
                ],
            )

        self.post_ids = []
        for title, username, description, post_type in POSTS:
            result = run_query(
                self.session,
                """INSERT INTO posts (title, username, description, type)
                   VALUES ($1, $2, $3, $4)
                   RETURNING id""",
                [title, username, description, post_type],
            )
            self.post_ids.append(result.scalar_one())

        p = self.post_ids
        for username, post_id in [("u1", p[0]), ("u2", p[1]), ("u1", p[3]), ("u1", p[4])]:
            run_query(
                self.session,
                "INSERT INTO likes (username, post_id) VALUES ($1, $2)",
                [username, post_id],
            )
        for username, post_id in [("u2", p[2]), ("u1", p[5])]:
            run_query(
                self.session,
                "INSERT INTO dislikes (username, post_id) VALUES ($1, $2)",
                [username, post_id],
            )

        run_query(
            self.session,
            """INSERT INTO follows (user_following_id, user_being_followed_id)
               VALUES ('u1', 'u2'), ('u2', 'u1')""",
        )

        for text_, username, post_id in [
            ("comment made by u1 on post 4", "u1", p[3]),
            ("comment made by u2 on post 1", "u2", p[0]),
        ]:
            run_query(
                self.session,
                "INSERT INTO comments (text, username, post_id) VALUES ($1, $2, $3)",
                [text_, username, post_id],
            )

        self.session.commit()

    def auth_header(self, username, password=None):
        response = self.client.post(
            "/auth/token",
            json={"username": username, "password": password or PASSWORDS[username]},
        )
        token = response.get_json()["token"]
        return {"Authorization": f"Bearer {token}"}
