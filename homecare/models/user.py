# models/user.py

from pydantic import BaseModel


class AccountCreateRequest(BaseModel):
	name: str
	user_name: str
	password: str
	foto: str | None = None

class LoginRequest(BaseModel):
	user_name: str
	password: str
