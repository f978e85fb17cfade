"""Pydantic schemas for fee structure endpoints."""
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from edusync.models.enums import FeeFrequency


class FeeParticularCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    frequency: FeeFrequency
    fee_type_id: int


class FeeStructureCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    academic_year: str = Field(min_length=1, max_length=20)
    description: str | None = None
    is_active: bool = True
    particulars: list[FeeParticularCreate] = []


class FeeParticularOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    amount: Decimal
    frequency: FeeFrequency
    fee_type_id: int


class FeeStructureOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    academic_year: str
    description: str | None
    is_active: bool
    particulars: list[FeeParticularOut]
