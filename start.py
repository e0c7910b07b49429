#!/usr/bin/env python3
"""
Home Nursing Service - Startup Script
Runs the API with uvicorn. Host and port come from HOST and PORT.
"""

import os
import sys

import uvicorn


def main():
	"""Start the Home Nursing Service API"""
	print("Home Nursing Service")
	print("=" * 50)

	# Tokens cannot be signed without a secret
	if not os.getenv("JWT_SECRET") and not os.path.exists(".env"):
		print("Error: JWT_SECRET is not set and no .env file was found.")
		print("Set JWT_SECRET to the token signing key.")
		sys.exit(1)

	if not os.getenv("MONGO_URI"):
		print("Warning: MONGO_URI not set, using mongodb://127.0.0.1:27017/")

	host = os.getenv("HOST", "0.0.0.0")
	port = int(os.getenv("PORT", "8000"))
	print(f"API documentation at: http://{host}:{port}/docs")
	print("=" * 50)

	uvicorn.run(
		"homecare.main:app",
		host=host,
		port=port,
		log_level="info",
		reload=os.getenv("RELOAD", "false").lower() == "true"
	)

if __name__ == "__main__":
	main()
