# main.py

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Settings are read on import, so the .env file is loaded first
load_dotenv()

from homecare.utils.logger import logger, setup_logging

# Needs to be called before any logs are sent, level comes from LOG_LEVEL
setup_logging()

from homecare import __version__
from homecare.api.routes import patients as patients_route
from homecare.api.routes import service_requests as service_requests_route
from homecare.api.routes import system as system_route
from homecare.api.routes import users as users_route
from homecare.core.errors import ApiError
from homecare.data.repositories.base import close_connection
from homecare.data.repositories.utils import ensure_indexes


def startup_event():
	"""Initialize application on startup"""
	logger(tag="startup").info("Starting home nursing backend...")
	try:
		ensure_indexes()
	except Exception as e:
		# The API still starts; requests report database errors individually
		logger(tag="startup").error(f"Could not ensure database indexes: {e}")
	logger(tag="startup").info("Startup complete")

def shutdown_event():
	"""Cleanup on shutdown"""
	logger(tag="shutdown").info("Shutting down home nursing backend...")
	close_connection()

@asynccontextmanager
async def lifespan(app: FastAPI):
	startup_event()
	yield
	shutdown_event()

app = FastAPI(
	lifespan=lifespan,
	title="Home Nursing Service",
	description="Booking backend for home nursing services: patients, service requests and authentication",
	version=__version__
)

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
	return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
	"""Report malformed input as a 400 with the validation messages."""
	details = "; ".join(
		f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
		for err in exc.errors()
	)
	logger(tag="validation").info(f"{request.method} {request.url.path} rejected: {details}")
	return JSONResponse(status_code=400, content={"message": "Invalid request", "error": details})

app.include_router(patients_route.router)
app.include_router(service_requests_route.router)
app.include_router(users_route.router)
app.include_router(system_route.router)

@app.get("/api/info")
async def get_api_info():
	"""Get API information, lists all paths available in the api, including those of included routers."""
	return {
		"name": "Home Nursing Service",
		"version": __version__,
		"endpoints": list(app.openapi()["paths"])
	}
