# api/routes/users.py

from fastapi import APIRouter, Depends

from homecare.core.errors import (ApiError, InternalError, NotFound,
                                  Unauthorized, ValidationFailed)
from homecare.core.security import (check_password, get_current_user_id,
                                    hash_password, issue_token)
from homecare.data.repositories.account import (AccountExists, create_account,
                                                get_account_by_id,
                                                get_account_by_user_name,
                                                public_profile)
from homecare.models.user import AccountCreateRequest, LoginRequest
from homecare.utils.logger import logger

router = APIRouter(prefix="/users", tags=["Users"])

@router.post("/register", status_code=201)
async def register_route(req: AccountCreateRequest):
	try:
		logger().info(f"POST /users/register user_name={req.user_name}")
		account = create_account(
			name=req.name,
			user_name=req.user_name,
			password_hash=hash_password(req.password),
			foto=req.foto
		)
		return public_profile(account)
	except AccountExists as e:
		raise ValidationFailed("Error registering user", str(e))
	except Exception as e:
		logger().error(f"Error registering user: {e}")
		raise InternalError("Error registering user", str(e))

@router.post("/login")
async def login_route(req: LoginRequest):
	"""Exchange a user name and password for a bearer token."""
	try:
		logger().info(f"POST /users/login user_name={req.user_name}")
		account = get_account_by_user_name(req.user_name)
		if not account or not check_password(req.password, account.get("password", "")):
			logger(tag="auth").info(f"Failed login for '{req.user_name}'")
			raise Unauthorized("Invalid credentials")

		profile = public_profile(account)
		return {
			"token": issue_token(profile["_id"]),
			"user": profile
		}
	except ApiError:
		raise
	except Exception as e:
		logger().error(f"Error logging in '{req.user_name}': {e}")
		raise InternalError("Error logging in", str(e))

@router.get("/me")
async def me_route(user_id: str = Depends(get_current_user_id)):
	try:
		account = get_account_by_id(user_id)
		if not account:
			raise NotFound("User not found")
		return public_profile(account)
	except ApiError:
		raise
	except Exception as e:
		logger().error(f"Error getting user {user_id}: {e}")
		raise InternalError("Error retrieving user", str(e))
