"""Patient data models exchanged with the IntakeOff API."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

__all__ = ["Address", "Patient", "PatientCreate", "PatientUpdate"]


class _WireModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class Address(_WireModel):
    street: str
    city: str
    state: str
    zip_code: str = Field(alias="zipCode")


class PatientCreate(_WireModel):
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    date_of_birth: datetime = Field(alias="dateOfBirth")
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[Address] = None


class Patient(PatientCreate):
    id: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class PatientUpdate(_WireModel):
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    date_of_birth: Optional[datetime] = Field(None, alias="dateOfBirth")
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
