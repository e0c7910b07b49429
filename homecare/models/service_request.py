# models/service_request.py

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class ServiceRequestStatus(str, Enum):
	"""
	Status of a service request. Any value can be set from any other value,
	there is no enforced transition graph.
	"""
	PENDING = "pendiente"
	ACCEPTED = "aceptada"
	REJECTED = "rechazada"
	COMPLETED = "completada"

	@classmethod
	def values(cls) -> list[str]:
		return [status.value for status in cls]

class ServiceRequestCreateRequest(BaseModel):
	nurse_id: str
	patient_ids: list[str]
	detalles: str | None = None
	fecha: datetime
	tarifa: float

class StatusUpdateRequest(BaseModel):
	# Left as a plain string so unknown values reach the route and get the "Invalid status" reply
	estado: str | None = None
