# data/repositories/service_request.py
"""
Service request operations for MongoDB.
A service request books a nurse for one or more of the requesting user's patients.

## Fields
	_id: index
	user_id: The id of the user requesting the service
	nurse_id: The id of the nurse assigned to the request
	patient_ids: Ids of the patients the service is for
	estado: pendiente | aceptada | rechazada | completada
	detalles: Additional details about the service
	fecha: When the service is scheduled
	tarifa: Agreed fee
	pago_realizado: Whether the user has paid
	pago_liberado: Whether the payment has been released to the nurse
	documentacion_servicio: Notes about the service performed
	observaciones: Observations about the care given
	recomendaciones: Recommendations for the user
"""

from datetime import datetime
from typing import Any

from pymongo import ReturnDocument

from homecare.data.repositories.base import (get_collection, stringify_id,
                                             to_object_id)
from homecare.data.repositories.patient import get_patients_by_ids
from homecare.models.service_request import ServiceRequestStatus
from homecare.utils.logger import logger

SERVICE_REQUESTS_COLLECTION = "service_requests"

def create_service_request(
	*,
	user_id: str,
	nurse_id: str,
	patient_ids: list[str],
	fecha: datetime,
	tarifa: float,
	detalles: str | None = None,
	collection_name: str = SERVICE_REQUESTS_COLLECTION
) -> dict[str, Any]:
	"""Inserts a pending, unpaid service request and returns the stored document."""
	collection = get_collection(collection_name)
	doc = {
		"user_id": user_id,
		"nurse_id": nurse_id,
		"patient_ids": patient_ids,
		"estado": ServiceRequestStatus.PENDING.value,
		"detalles": detalles,
		"fecha": fecha,
		"tarifa": tarifa,
		"pago_realizado": False,
		"pago_liberado": False,
		"documentacion_servicio": None,
		"observaciones": None,
		"recomendaciones": None
	}
	result = collection.insert_one(doc)
	logger().info(f"Created service request {result.inserted_id} user={user_id} nurse={nurse_id}")
	return stringify_id(doc)

def participant_filter(user_id: str, estado: str | None = None) -> dict[str, Any]:
	"""Matches requests where the user is either the requester or the assigned nurse."""
	query: dict[str, Any] = {"$or": [{"user_id": user_id}, {"nurse_id": user_id}]}
	if estado:
		query["estado"] = estado
	return query

def count_service_requests(
	query: dict[str, Any],
	/, *,
	collection_name: str = SERVICE_REQUESTS_COLLECTION
) -> int:
	return get_collection(collection_name).count_documents(query)

def list_service_requests(
	query: dict[str, Any],
	/,
	skip: int,
	limit: int,
	*,
	collection_name: str = SERVICE_REQUESTS_COLLECTION
) -> list[dict[str, Any]]:
	collection = get_collection(collection_name)
	cursor = collection.find(query).skip(skip).limit(limit)
	return [stringify_id(r) for r in cursor]

def update_service_request_status(
	request_id: str,
	/,
	nurse_id: str,
	estado: str,
	*,
	collection_name: str = SERVICE_REQUESTS_COLLECTION
) -> dict[str, Any] | None:
	"""
	Sets the status of a request assigned to `nurse_id` in a single find-and-update.
	Returns the updated document, or None if no request matches the id and nurse.
	"""
	oid = to_object_id(request_id)
	if oid is None:
		return None
	logger().info(f"Updating service request {request_id} to '{estado}' by nurse {nurse_id}")
	updated = get_collection(collection_name).find_one_and_update(
		{"_id": oid, "nurse_id": nurse_id},
		{"$set": {"estado": estado}},
		return_document=ReturnDocument.AFTER
	)
	return stringify_id(updated) if updated else None

def get_service_request_for_participant(
	request_id: str,
	/,
	user_id: str,
	*,
	collection_name: str = SERVICE_REQUESTS_COLLECTION
) -> dict[str, Any] | None:
	"""Finds a request by id, only if the user is its requester or nurse."""
	oid = to_object_id(request_id)
	if oid is None:
		return None
	query = {"_id": oid, **participant_filter(user_id)}
	found = get_collection(collection_name).find_one(query)
	return stringify_id(found) if found else None

def populate_patients(requests: list[dict[str, Any]], /) -> list[dict[str, Any]]:
	"""
	Replaces each request's `patient_ids` with the referenced patients' public fields.

	All ids are resolved with one lookup. Order within a request is kept and ids
	that no longer resolve to a patient are dropped.
	"""
	all_ids = list({pid for r in requests for pid in r.get("patient_ids", [])})
	patients = get_patients_by_ids(all_ids)
	for r in requests:
		r["patient_ids"] = [patients[pid] for pid in r.get("patient_ids", []) if pid in patients]
	return requests
