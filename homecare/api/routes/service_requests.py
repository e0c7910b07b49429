# api/routes/service_requests.py

from fastapi import APIRouter, Depends, Query

from homecare.config.settings import settings
from homecare.core.errors import (ApiError, Forbidden, InternalError, NotFound,
                                  ValidationFailed)
from homecare.core.security import get_current_user_id
from homecare.data.repositories.patient import count_owned_patients
from homecare.data.repositories.service_request import (
    count_service_requests, create_service_request,
    get_service_request_for_participant, list_service_requests,
    participant_filter, populate_patients, update_service_request_status)
from homecare.models.service_request import (ServiceRequestCreateRequest,
                                             ServiceRequestStatus,
                                             StatusUpdateRequest)
from homecare.utils.logger import logger

router = APIRouter(prefix="/service-requests", tags=["Service Requests"])

@router.post("", status_code=201)
async def create_service_request_route(
	req: ServiceRequestCreateRequest,
	user_id: str = Depends(get_current_user_id)
):
	"""Book a nurse for some of the caller's patients."""
	try:
		logger().info(f"POST /service-requests user={user_id} nurse={req.nurse_id} patients={len(req.patient_ids)}")
		# Unknown ids and other users' patients are both reported as denied
		owned = count_owned_patients(user_id, req.patient_ids)
		if owned != len(req.patient_ids):
			logger(tag="ownership").warning(f"User {user_id} referenced patients they do not own")
			raise Forbidden("Access denied to one or more selected patients")

		return create_service_request(
			user_id=user_id,
			nurse_id=req.nurse_id,
			patient_ids=req.patient_ids,
			detalles=req.detalles,
			fecha=req.fecha,
			tarifa=req.tarifa
		)
	except ApiError:
		raise
	except Exception as e:
		logger().error(f"Error creating service request: {e}")
		raise ValidationFailed("Error creating service request", str(e))

@router.get("")
async def list_service_requests_route(
	estado: str | None = None,
	page: int = Query(default=settings.default_page),
	limit: int = Query(default=settings.default_limit),
	user_id: str = Depends(get_current_user_id)
):
	"""List requests the caller made or is assigned to, optionally filtered by status."""
	try:
		logger().info(f"GET /service-requests user={user_id} estado={estado} page={page} limit={limit}")
		query = participant_filter(user_id, estado)
		skip = (page - 1) * limit
		total = count_service_requests(query)
		requests = populate_patients(list_service_requests(query, skip, limit))
		return {
			"total": total,
			"page": page,
			"limit": limit,
			"requests": requests
		}
	except Exception as e:
		logger().error(f"Error listing service requests: {e}")
		raise InternalError("Error retrieving service requests", str(e))

@router.put("/{request_id}")
async def update_service_request_status_route(
	request_id: str,
	req: StatusUpdateRequest,
	user_id: str = Depends(get_current_user_id)
):
	"""Set the status of a request. Only the assigned nurse can do this."""
	if req.estado not in ServiceRequestStatus.values():
		logger().info(f"PUT /service-requests/{request_id} rejected status '{req.estado}'")
		raise ValidationFailed("Invalid status")

	try:
		logger().info(f"PUT /service-requests/{request_id} nurse={user_id} estado={req.estado}")
		service_request = update_service_request_status(request_id, user_id, req.estado)
		if not service_request:
			raise NotFound("Service request not found")
		return {
			"message": f"Request {req.estado} successfully",
			"serviceRequest": service_request
		}
	except ApiError:
		raise
	except Exception as e:
		logger().error(f"Error updating service request: {e}")
		raise ValidationFailed("Error updating service request", str(e))

@router.get("/{request_id}")
async def get_service_request_route(
	request_id: str,
	user_id: str = Depends(get_current_user_id)
):
	try:
		logger().info(f"GET /service-requests/{request_id} user={user_id}")
		service_request = get_service_request_for_participant(request_id, user_id)
		if not service_request:
			raise NotFound("Service request not found")
		return populate_patients([service_request])[0]
	except ApiError:
		raise
	except Exception as e:
		logger().error(f"Error getting service request: {e}")
		raise InternalError("Error retrieving service request details", str(e))
