# tests/helpers.py

import unittest
from unittest import mock

import mongomock
from bson import ObjectId
from fastapi.testclient import TestClient

from homecare.config.settings import settings
from homecare.core.security import issue_token
from homecare.data.repositories import base as db_base
from homecare.data.repositories.utils import ensure_indexes
from homecare.main import app


def new_user_id() -> str:
	return str(ObjectId())

def auth_header(user_id: str) -> dict[str, str]:
	return {"Authorization": f"Bearer {issue_token(user_id)}"}

class MongoTestCase(unittest.TestCase):
	"""Runs each test against an empty in-memory MongoDB."""

	def setUp(self):
		db_base.close_connection()
		patcher = mock.patch.object(db_base, "MongoClient", mongomock.MongoClient)
		patcher.start()
		self.addCleanup(patcher.stop)
		self.addCleanup(db_base.close_connection)
		self.addCleanup(self._drop_database)
		self.db = db_base.get_database()
		ensure_indexes()

	def _drop_database(self):
		db_base.get_database().client.drop_database(settings.mongo_db)

class ApiTestCase(MongoTestCase):
	"""MongoTestCase with a client for the API and two registered identities."""

	def setUp(self):
		super().setUp()
		self.client = TestClient(app)
		self.user_a = new_user_id()
		self.user_b = new_user_id()
		self.nurse = new_user_id()

	def create_patient(self, user_id: str, name: str = "Ana") -> str:
		"""Creates a patient through the API and returns its id from the database."""
		response = self.client.post(
			"/patients",
			json={"name": name, "fecha_nacimiento": "1990-01-01", "genero": "F", "descripcion": "-"},
			headers=auth_header(user_id)
		)
		self.assertEqual(response.status_code, 201, response.text)
		doc = self.db["patients"].find_one({"usuario_id": user_id, "name": name})
		return str(doc["_id"])

	def create_request(self, user_id: str, nurse_id: str, patient_ids: list[str], **extra) -> dict:
		payload = {
			"nurse_id": nurse_id,
			"patient_ids": patient_ids,
			"detalles": "Curacion de herida",
			"fecha": "2026-11-02T09:00:00",
			"tarifa": 45.5,
			**extra
		}
		return self.client.post("/service-requests", json=payload, headers=auth_header(user_id))
