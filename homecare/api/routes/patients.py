# api/routes/patients.py

from fastapi import APIRouter, Depends, Query

from homecare.config.settings import settings
from homecare.core.errors import InternalError, ValidationFailed
from homecare.core.security import get_current_user_id
from homecare.data.repositories.base import without_id
from homecare.data.repositories.patient import (count_patients, create_patient,
                                                list_patients)
from homecare.models.patient import PatientCreateRequest
from homecare.utils.logger import logger

router = APIRouter(prefix="/patients", tags=["Patients"])

@router.get("")
async def list_patients_route(
	page: int = Query(default=settings.default_page),
	limit: int = Query(default=settings.default_limit),
	user_id: str = Depends(get_current_user_id)
):
	"""List the caller's patients, one page at a time."""
	try:
		logger().info(f"GET /patients user={user_id} page={page} limit={limit}")
		skip = (page - 1) * limit
		total = count_patients(user_id)
		patients = list_patients(user_id, skip, limit)
		return {
			"total": total,
			"page": page,
			"limit": limit,
			"patients": patients
		}
	except Exception as e:
		logger().error(f"Error listing patients: {e}")
		raise InternalError("Error retrieving patients", str(e))

@router.post("", status_code=201)
async def create_patient_route(
	req: PatientCreateRequest,
	user_id: str = Depends(get_current_user_id)
):
	try:
		logger().info(f"POST /patients user={user_id} name={req.name}")
		patient = create_patient(user_id, req.model_dump())
		return without_id(patient)
	except Exception as e:
		logger().error(f"Error creating patient: {e}")
		raise ValidationFailed("Error creating patient", str(e))
