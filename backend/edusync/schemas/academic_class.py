"""Pydantic schemas for academic class endpoints."""
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AcademicClassCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    sections: list[str] = []


class SectionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    uuid: UUID
    section_name: str


class AcademicClassOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    uuid: UUID
    name: str
    sections: list[SectionOut]
