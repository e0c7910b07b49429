# data/repositories/patient.py
"""
Patient operations for MongoDB.
A patient is a person receiving care, registered by the user who books services for them.

## Fields
	_id: index
	name: The name of the patient
	fecha_nacimiento: Date of birth, as given by the client
	genero: Gender
	descripcion: Free text description of the patient's condition
	usuario_id: The id of the user who owns this patient
"""

from typing import Any

from homecare.data.repositories.base import (get_collection, to_object_ids,
                                             without_id)
from homecare.utils.logger import logger

PATIENTS_COLLECTION = "patients"

# Fields exposed when patients are embedded into service requests
PUBLIC_FIELDS = ("name", "fecha_nacimiento", "genero", "descripcion")

def create_patient(
	owner_id: str,
	/,
	fields: dict[str, Any],
	*,
	collection_name: str = PATIENTS_COLLECTION
) -> dict[str, Any]:
	"""Inserts a patient owned by `owner_id` and returns the stored document."""
	collection = get_collection(collection_name)
	doc = {**fields, "usuario_id": owner_id}
	result = collection.insert_one(doc)
	logger().info(f"Created patient {result.inserted_id} for user {owner_id}")
	return doc

def count_patients(
	owner_id: str,
	/, *,
	collection_name: str = PATIENTS_COLLECTION
) -> int:
	return get_collection(collection_name).count_documents({"usuario_id": owner_id})

def list_patients(
	owner_id: str,
	/,
	skip: int,
	limit: int,
	*,
	collection_name: str = PATIENTS_COLLECTION
) -> list[dict[str, Any]]:
	"""Returns one page of the user's patients with `_id` removed."""
	collection = get_collection(collection_name)
	cursor = collection.find({"usuario_id": owner_id}).skip(skip).limit(limit)
	return [without_id(p) for p in cursor]

def count_owned_patients(
	owner_id: str,
	/,
	patient_ids: list[str],
	*,
	collection_name: str = PATIENTS_COLLECTION
) -> int:
	"""Counts how many of the given ids are patients owned by `owner_id`."""
	logger().info(f"Checking ownership of {len(patient_ids)} patients for user {owner_id}")
	return get_collection(collection_name).count_documents({
		"_id": {"$in": to_object_ids(patient_ids)},
		"usuario_id": owner_id
	})

def get_patients_by_ids(
	patient_ids: list[str],
	/, *,
	collection_name: str = PATIENTS_COLLECTION
) -> dict[str, dict[str, Any]]:
	"""Looks up patients by id, returning their public fields keyed by the id string."""
	if not patient_ids:
		return {}
	collection = get_collection(collection_name)
	cursor = collection.find(
		{"_id": {"$in": to_object_ids(patient_ids)}},
		{field: 1 for field in PUBLIC_FIELDS}
	)
	patients = {}
	for p in cursor:
		p["_id"] = str(p["_id"])
		patients[p["_id"]] = p
	return patients
