import unittest
from unittest.mock import patch

from common import AppTestCase

from adulting.db import run_query
from adulting.errors import BadRequestError, UnauthorizedError
from adulting.repositories import user_repository
from adulting.services import auth_service


class TestAuthService(AppTestCase):
    def test_authenticate_returns_public_profile(self):
        user = auth_service.authenticate(self.session, "u1", "password1")
        self.assertEqual(
            user,
            {
                "username": "u1",
                "first_name": "U1F",
                "last_name": "U1L",
                "email": "u1@email.com",
            },
        )

    def test_authenticate_unknown_user(self):
        with self.assertRaises(UnauthorizedError):
            auth_service.authenticate(self.session, "nope", "password")

    def test_authenticate_wrong_password(self):
        with self.assertRaises(UnauthorizedError):
            auth_service.authenticate(self.session, "u1", "wrong")

    def test_register_then_authenticate(self):
        new_user = auth_service.register(
            self.session,
            username="new",
            password="password",
            first_name="Test",
            last_name="Tester",
            email="test@test.com",
        )
        expected = {
            "username": "new",
            "first_name": "Test",
            "last_name": "Tester",
            "email": "test@test.com",
        }
        self.assertEqual(new_user, expected)

        user = auth_service.authenticate(self.session, "new", "password")
        self.assertEqual(user, expected)
        self.assertNotIn("password", user)

    def test_register_stores_hash_not_plaintext(self):
        auth_service.register(
            self.session, "new", "password", "Test", "Tester", "test@test.com"
        )
        stored = run_query(
            self.session,
            "SELECT password FROM users WHERE username = $1",
            ["new"],
        ).scalar_one()
        self.assertNotEqual(stored, "password")
        self.assertTrue(stored.startswith("pbkdf2:sha256:1000$"))

    def test_register_duplicate_username(self):
        with self.assertRaises(BadRequestError) as ctx:
            auth_service.register(
                self.session, "u1", "password", "Test", "Tester", "test@test.com"
            )
        self.assertIn("u1", ctx.exception.message)

    def test_register_duplicate_when_insert_conflicts(self):
        # The name is taken between the existence check and the insert.
        with patch.object(user_repository, "exists", return_value=False):
            with self.assertRaises(BadRequestError) as ctx:
                auth_service.register(
                    self.session, "u1", "password", "Test", "Tester", "t@t.com"
                )
        self.assertEqual(ctx.exception.message, "Duplicate username: u1")
        self.assertEqual(
            auth_service.authenticate(self.session, "u1", "password1")["username"],
            "u1",
        )

    def test_create_token_has_username_identity(self):
        from flask_jwt_extended import decode_token

        token = auth_service.create_token({"username": "u1"})
        self.assertEqual(decode_token(token)["sub"], "u1")


if __name__ == "__main__":
    unittest.main()
