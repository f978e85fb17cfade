"""Pydantic schemas for CSV bulk import results."""
import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ImportStatus(str, enum.Enum):
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class ImportReport(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    status: ImportStatus
    total_rows: int = 0
    success_count: int = 0
    failure_count: int = 0
    error_messages: tuple[str, ...] = ()
