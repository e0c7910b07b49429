import os

# Settings are read on import and need a signing key
os.environ.setdefault("JWT_SECRET", "test-signing-key")
os.environ.setdefault("MONGO_DB", "homecare_test")
