# api/routes/system.py

import time

from fastapi import APIRouter

from homecare import __version__
from homecare.data.repositories.utils import ping_database

router = APIRouter(prefix="/system", tags=["System"])

@router.get("/health")
async def health_check():
	"""Health check endpoint"""
	database_up = ping_database()
	return {
		"status": "healthy" if database_up else "degraded",
		"version": __version__,
		"timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
		"components": {
			"database": "operational" if database_up else "unreachable"
		}
	}
