# data/repositories/utils.py

from pymongo import ASCENDING

from homecare.data.repositories.account import USERS_COLLECTION
from homecare.data.repositories.base import get_collection, get_database
from homecare.data.repositories.patient import PATIENTS_COLLECTION
from homecare.data.repositories.service_request import \
    SERVICE_REQUESTS_COLLECTION
from homecare.utils.logger import logger


def create_index(
	collection_name: str,
	field_name: str,
	*,
	unique: bool = False
) -> None:
	"""Creates an index on a specified collection."""
	collection = get_collection(collection_name)
	collection.create_index([(field_name, ASCENDING)], unique=unique)

def ensure_indexes() -> None:
	"""Creates the indexes the application relies on. Existing indexes are left untouched."""
	create_index(USERS_COLLECTION, "user_name", unique=True)
	create_index(PATIENTS_COLLECTION, "usuario_id")
	create_index(SERVICE_REQUESTS_COLLECTION, "user_id")
	create_index(SERVICE_REQUESTS_COLLECTION, "nurse_id")
	logger(tag="indexes").info("Database indexes ensured")

def ping_database() -> bool:
	"""Returns True if the database answers a ping."""
	try:
		get_database().command("ping")
		return True
	except Exception as e:
		logger().error(f"Database ping failed: {e}")
		return False
