import unittest

from common import AppTestCase


VALID_REGISTRATION = {
    "username": "new_user",
    "password": "pass123",
    "firstName": "New",
    "lastName": "User",
    "email": "new@user.com",
}


class TestAuthRegisterValidation(AppTestCase):
    def _register(self, **overrides):
        body = {**VALID_REGISTRATION, **overrides}
        body = {key: value for key, value in body.items() if value is not None}
        return self.client.post("/auth/register", json=body)

    def test_register_rejects_missing_password(self):
        response = self._register(password=None)
        self.assertEqual(response.status_code, 400)
        self.assertIn("password", response.get_json()["error"]["message"])

    def test_register_rejects_missing_first_name(self):
        response = self._register(firstName=None)
        self.assertEqual(response.status_code, 400)
        self.assertIn("firstName", response.get_json()["error"]["message"])

    def test_register_rejects_bad_email(self):
        response = self._register(email="not-an-email")
        self.assertEqual(response.status_code, 400)
        self.assertIn("email", response.get_json()["error"]["message"])

    def test_register_rejects_short_password(self):
        response = self._register(password="abc")
        self.assertEqual(response.status_code, 400)

    def test_register_rejects_unknown_fields(self):
        response = self._register(isAdmin=True)
        self.assertEqual(response.status_code, 400)

    def test_register_rejects_invalid_json(self):
        response = self.client.post(
            "/auth/register",
            data="not-json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.get_json()["error"],
            {"message": "Invalid JSON body", "status": 400},
        )

    def test_register_duplicate_username(self):
        response = self._register(username="u1")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.get_json()["error"]["message"], "Duplicate username: u1"
        )


if __name__ == "__main__":
    unittest.main()
