"""MongoDB repository tests

Run with `python -m unittest discover -p "*test*.py"` from the project root. MongoDB is replaced
by mongomock, so no server is needed.
"""

import unittest
from datetime import datetime

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from homecare.data.repositories import account as account_repo
from homecare.data.repositories import patient as patient_repo
from homecare.data.repositories import service_request as request_repo
from homecare.data.repositories.base import (to_object_id, to_object_ids,
                                             without_id)
from tests.helpers import MongoTestCase


def _patient(name: str) -> dict:
	return {"name": name, "fecha_nacimiento": "1980-05-05", "genero": "M", "descripcion": "Diabetes"}

class TestPatientRepository(MongoTestCase):

	def test_create_stamps_owner(self):
		doc = patient_repo.create_patient("owner-1", {**_patient("Luis"), "usuario_id": "someone-else"})
		self.assertEqual(doc["usuario_id"], "owner-1")
		self.assertEqual(patient_repo.count_patients("owner-1"), 1)
		self.assertEqual(patient_repo.count_patients("someone-else"), 0)

	def test_list_pages_strip_ids(self):
		for i in range(5):
			patient_repo.create_patient("owner-1", _patient(f"P{i}"))
		page = patient_repo.list_patients("owner-1", 3, 3)
		self.assertEqual(len(page), 2)
		self.assertTrue(all("_id" not in p for p in page))

	def test_count_owned_patients_ignores_foreign_and_invalid_ids(self):
		own = str(patient_repo.create_patient("owner-1", _patient("A"))["_id"])
		foreign = str(patient_repo.create_patient("owner-2", _patient("B"))["_id"])
		self.assertEqual(patient_repo.count_owned_patients("owner-1", [own]), 1)
		self.assertEqual(patient_repo.count_owned_patients("owner-1", [own, foreign, "bad-id"]), 1)

	def test_get_patients_by_ids_returns_public_fields(self):
		pid = str(patient_repo.create_patient("owner-1", _patient("A"))["_id"])
		found = patient_repo.get_patients_by_ids([pid, str(ObjectId())])
		self.assertEqual(list(found), [pid])
		self.assertNotIn("usuario_id", found[pid])
		self.assertEqual(patient_repo.get_patients_by_ids([]), {})

class TestServiceRequestRepository(MongoTestCase):

	def setUp(self):
		super().setUp()
		self.p1 = str(patient_repo.create_patient("user-1", _patient("Uno"))["_id"])
		self.p2 = str(patient_repo.create_patient("user-1", _patient("Dos"))["_id"])
		self.request = request_repo.create_service_request(
			user_id="user-1",
			nurse_id="nurse-1",
			patient_ids=[self.p2, self.p1],
			fecha=datetime(2026, 11, 2, 9, 0),
			tarifa=30
		)

	def test_defaults(self):
		self.assertEqual(self.request["estado"], "pendiente")
		self.assertFalse(self.request["pago_realizado"])
		self.assertFalse(self.request["pago_liberado"])
		self.assertIsInstance(self.request["_id"], str)

	def test_participant_filter(self):
		for user_id, expected in (("user-1", 1), ("nurse-1", 1), ("other", 0)):
			self.assertEqual(request_repo.count_service_requests(request_repo.participant_filter(user_id)), expected)
		self.assertEqual(request_repo.count_service_requests(request_repo.participant_filter("user-1", "aceptada")), 0)

	def test_update_status_requires_matching_nurse(self):
		self.assertIsNone(request_repo.update_service_request_status(self.request["_id"], "user-1", "aceptada"))
		updated = request_repo.update_service_request_status(self.request["_id"], "nurse-1", "aceptada")
		self.assertEqual(updated["estado"], "aceptada")
		self.assertIsNone(request_repo.update_service_request_status("bad-id", "nurse-1", "aceptada"))

	def test_get_for_participant(self):
		self.assertIsNotNone(request_repo.get_service_request_for_participant(self.request["_id"], "nurse-1"))
		self.assertIsNone(request_repo.get_service_request_for_participant(self.request["_id"], "other"))

	def test_populate_keeps_order_and_drops_missing(self):
		self.db["patients"].delete_one({"_id": ObjectId(self.p1)})
		requests = request_repo.list_service_requests(request_repo.participant_filter("user-1"), 0, 10)
		populated = request_repo.populate_patients(requests)
		self.assertEqual([p["name"] for p in populated[0]["patient_ids"]], ["Dos"])

class TestAccountRepository(MongoTestCase):

	def test_user_names_are_unique(self):
		account_repo.create_account(name="Ana", user_name="ana", password_hash="x")
		with self.assertRaises(account_repo.AccountExists) as ctx:
			account_repo.create_account(name="Ana 2", user_name="ana", password_hash="y")
		self.assertIsInstance(ctx.exception.__cause__, DuplicateKeyError)

	def test_lookup_and_public_profile(self):
		doc = account_repo.create_account(name="Ana", user_name="ana", password_hash="x", foto="ana.png")
		found = account_repo.get_account_by_id(str(doc["_id"]))
		self.assertEqual(found["user_name"], "ana")
		self.assertIsNone(account_repo.get_account_by_id("bad-id"))
		profile = account_repo.public_profile(account_repo.get_account_by_user_name("ana"))
		self.assertNotIn("password", profile)
		self.assertEqual(profile["verificado"], "No")

class TestIdHelpers(unittest.TestCase):

	def test_object_id_parsing(self):
		oid = ObjectId()
		self.assertEqual(to_object_id(str(oid)), oid)
		self.assertIsNone(to_object_id("xyz"))
		self.assertIsNone(to_object_id(None))
		self.assertEqual(to_object_ids([str(oid), "xyz"]), [oid])

	def test_without_id(self):
		self.assertEqual(without_id({"_id": 1, "name": "A"}), {"name": "A"})

if __name__ == "__main__":
	unittest.main(verbosity=2)
