# tests/test_users.py

import unittest

from homecare.core import security
from tests.helpers import ApiTestCase, auth_header, new_user_id


class TestUserEndpoints(ApiTestCase):

	def register(self, user_name: str = "ana.nurse", password: str = "s3cret"):
		return self.client.post(
			"/users/register",
			json={"name": "Ana Perez", "user_name": user_name, "password": password}
		)

	def test_register_stores_hashed_password_and_hides_it(self):
		response = self.register()
		self.assertEqual(response.status_code, 201)
		body = response.json()
		self.assertNotIn("password", body)
		self.assertEqual(body["verificado"], "No")
		self.assertEqual(body["user_name"], "ana.nurse")

		stored = self.db["users"].find_one({"user_name": "ana.nurse"})
		self.assertNotEqual(stored["password"], "s3cret")
		self.assertTrue(stored["password"].startswith("$argon2id$"))

	def test_duplicate_user_name_is_400(self):
		self.register()
		response = self.register()
		self.assertEqual(response.status_code, 400)
		self.assertEqual(self.db["users"].count_documents({}), 1)

	def test_login_returns_token_usable_on_protected_routes(self):
		user_id = self.register().json()["_id"]
		response = self.client.post("/users/login", json={"user_name": "ana.nurse", "password": "s3cret"})
		self.assertEqual(response.status_code, 200)
		token = response.json()["token"]
		self.assertEqual(security.verify_token(token), user_id)

		me = self.client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
		self.assertEqual(me.status_code, 200)
		self.assertEqual(me.json()["_id"], user_id)

	def test_wrong_password_and_unknown_user_are_401(self):
		self.register()
		for payload in ({"user_name": "ana.nurse", "password": "nope"}, {"user_name": "ghost", "password": "s3cret"}):
			response = self.client.post("/users/login", json=payload)
			self.assertEqual(response.status_code, 401)
			self.assertEqual(response.json()["message"], "Invalid credentials")

	def test_me_for_deleted_account_is_404(self):
		response = self.client.get("/users/me", headers=auth_header(new_user_id()))
		self.assertEqual(response.status_code, 404)

class TestSystemEndpoints(ApiTestCase):

	def test_health_reports_database(self):
		response = self.client.get("/system/health")
		self.assertEqual(response.status_code, 200)
		self.assertIn("database", response.json()["components"])

	def test_api_info_lists_routes(self):
		endpoints = self.client.get("/api/info").json()["endpoints"]
		self.assertIn("/patients", endpoints)
		self.assertIn("/service-requests/{request_id}", endpoints)

if __name__ == "__main__":
	unittest.main(verbosity=2)
