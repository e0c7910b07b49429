# data/repositories/base.py

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from homecare.config.settings import settings
from homecare.utils.logger import logger

_mongo_client: MongoClient | None = None

def get_database(db_name: str | None = None) -> Database:
	"""Gets the database instance, managing a single connection."""
	global _mongo_client
	if _mongo_client is None:
		try:
			logger().info("Initializing MongoDB connection.")
			_mongo_client = MongoClient(settings.mongo_uri)
		except Exception as e:
			logger().error(f"Failed to connect to MongoDB: {e}")
			# Callers decide how a connection failure is reported
			raise
	return _mongo_client[db_name or settings.mongo_db]

def close_connection():
	"""Closes the MongoDB connection."""
	global _mongo_client
	if _mongo_client:
		logger().info("Closing MongoDB connection.")
		_mongo_client.close()
		_mongo_client = None

def get_collection(name: str) -> Collection:
	"""Retrieves a MongoDB collection by name. It is created on first insert."""
	return get_database().get_collection(name)

def to_object_id(value: str | None) -> ObjectId | None:
	"""Parses a hex id, returning None for anything that is not a valid ObjectId."""
	# ObjectId(None) would generate a fresh id
	if value is None:
		return None
	try:
		return ObjectId(value)
	except (InvalidId, TypeError):
		return None

def to_object_ids(values: list[str]) -> list[ObjectId]:
	"""Parses a list of hex ids, silently skipping invalid ones so they match nothing."""
	return [oid for oid in (to_object_id(v) for v in values) if oid is not None]

def stringify_id(document: dict[str, Any]) -> dict[str, Any]:
	"""Converts the document's `_id` to a string so it can be returned as JSON."""
	if document.get("_id") is not None:
		document["_id"] = str(document["_id"])
	return document

def without_id(document: dict[str, Any]) -> dict[str, Any]:
	"""Returns a copy of the document without its `_id`."""
	return {k: v for k, v in document.items() if k != "_id"}
