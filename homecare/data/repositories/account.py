# data/repositories/account.py

from datetime import datetime, timezone
from typing import Any

from pymongo.errors import DuplicateKeyError

from homecare.data.repositories.base import (get_collection, stringify_id,
                                             to_object_id)
from homecare.utils.logger import logger

USERS_COLLECTION = "users"

# Never returned to clients
PRIVATE_FIELDS = ("password",)

class AccountExists(Exception):
	"""Raised when the user name is already taken."""

def public_profile(account: dict[str, Any]) -> dict[str, Any]:
	return {k: v for k, v in stringify_id(account).items() if k not in PRIVATE_FIELDS}

def create_account(
	*,
	name: str,
	user_name: str,
	password_hash: str,
	foto: str | None = None,
	collection_name: str = USERS_COLLECTION
) -> dict[str, Any]:
	"""Creates a new, unverified user account and returns the stored document."""
	collection = get_collection(collection_name)
	doc = {
		"name": name,
		"user_name": user_name,
		"password": password_hash,
		"foto": foto,
		"verificado": "No",
		"created_at": datetime.now(timezone.utc)
	}
	try:
		result = collection.insert_one(doc)
	except DuplicateKeyError as e:
		logger().warning(f"User name '{user_name}' already taken")
		raise AccountExists(f"User name '{user_name}' is already taken") from e
	logger().info(f"Created new account: {result.inserted_id}")
	return doc

def get_account_by_user_name(
	user_name: str,
	/, *,
	collection_name: str = USERS_COLLECTION
) -> dict[str, Any] | None:
	return get_collection(collection_name).find_one({"user_name": user_name})

def get_account_by_id(
	user_id: str,
	/, *,
	collection_name: str = USERS_COLLECTION
) -> dict[str, Any] | None:
	oid = to_object_id(user_id)
	if oid is None:
		return None
	return get_collection(collection_name).find_one({"_id": oid})
