# models/patient.py

from pydantic import BaseModel


class PatientCreateRequest(BaseModel):
	name: str
	fecha_nacimiento: str
	genero: str
	descripcion: str | None = None
