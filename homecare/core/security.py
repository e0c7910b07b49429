# core/security.py
"""
Bearer token issuing and verification, the auth gate dependency, and password hashing
(Argon2id through pwdlib).

Tokens are HS256 JWTs with the payload `{"userId": ..., "iat": ..., "exp": ...}`,
signed with the `JWT_SECRET` from the settings.
"""

from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Header
from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

from homecare.config.settings import settings
from homecare.core.errors import Forbidden, Unauthorized
from homecare.utils.logger import logger

# Argon2id with the library's recommended parameters
password_hasher = PasswordHash.recommended()

def issue_token(user_id: str) -> str:
	"""Creates a signed token for the user, valid for `token_ttl_minutes`."""
	now = datetime.now(timezone.utc)
	payload = {
		"userId": user_id,
		"iat": now,
		"exp": now + timedelta(minutes=settings.token_ttl_minutes)
	}
	return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

def verify_token(token: str) -> str:
	"""Returns the user id carried by the token. Raises Forbidden if it is invalid or expired."""
	try:
		payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
	except jwt.ExpiredSignatureError as e:
		logger(tag="auth").info("Rejected expired token")
		raise Forbidden("Token expired", str(e)) from e
	except jwt.InvalidTokenError as e:
		logger(tag="auth").info(f"Rejected invalid token: {e}")
		raise Forbidden("Invalid token", str(e)) from e

	user_id = payload.get("userId")
	if not user_id:
		raise Forbidden("Invalid token", "Token payload has no userId")
	return str(user_id)

def get_current_user_id(authorization: str | None = Header(default=None)) -> str:
	"""
	Auth gate for the protected routes.

	Expects `Authorization: Bearer <token>`. A missing header or credential is a 401,
	a credential that fails verification is a 403.
	"""
	parts = authorization.split(" ") if authorization else []
	token = parts[1] if len(parts) > 1 else None
	if not token:
		raise Unauthorized()
	return verify_token(token)

def hash_password(raw_password: str) -> str:
	return password_hasher.hash(raw_password)

def check_password(raw_password: str, encoded: str) -> bool:
	"""Returns False for a wrong password or a stored value no hasher recognises."""
	try:
		return password_hasher.verify(raw_password, encoded)
	except UnknownHashError:
		return False
