"""Bulk import of students and staff from CSV.

The import is resilient and row-oriented:

1. Roles and class/sections are snapshotted once (see reference_cache) so the
   row loop never queries them.
2. Rows are streamed one at a time. Each row is validated, checked for
   conflicts against the live database and written inside its own
   transaction; a failing row rolls back alone and is recorded in the report.
3. Only a structural CSV error (bad quoting, undecodable bytes) stops the run,
   in which case the report comes back FAILED without tallies.

Columns are positional. Students:
    firstName, lastName, middleName, email, dateOfBirth, rollNo, gender,
    enrollmentNumber, enrollmentDate, className, sectionName
Staff:
    firstName, lastName, middleName, email, dateOfBirth, gender, employeeId,
    joiningDate, jobTitle, department, staffType[, officeLocation,
    qualification, yearsOfExperience]
"""
import csv
import enum
import io
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from edusync.core.config import settings
from edusync.models.enrollment import Staff, Student
from edusync.models.enums import Department, Gender, StaffType
from edusync.models.user import ROLE_STUDENT, staff_role_name
from edusync.schemas.imports import ImportReport, ImportStatus
from edusync.services.csv_validation import (
    field_at,
    parse_date,
    parse_enum,
    parse_int,
    validate_email,
    validate_string,
)
from edusync.services.reference_cache import ReferenceCache, build_reference_cache
from edusync.services.registration import (
    email_exists,
    employee_id_exists,
    enrollment_number_exists,
    register_staff,
    register_student,
)

logger = logging.getLogger(__name__)

# Index of the first staff column handed to the registration helper unparsed
STAFF_EXTRA_FIELDS_START = 11


class MalformedImportFileError(ValueError):
    """The upload has no header row."""


class DuplicateRecordError(ValueError):
    """A unique value in the row is already taken."""


class ReferenceNotFoundError(LookupError):
    """A class/section named in the row does not exist."""


class MissingRoleError(RuntimeError):
    """A role the importer depends on is missing from the database."""


class ImportKind(str, enum.Enum):
    STUDENTS = "students"
    STAFF = "staff"

    @classmethod
    def parse(cls, value: str | None) -> "ImportKind | None":
        """Case-insensitive match; None for anything unrecognised."""
        try:
            return cls((value or "").lower())
        except ValueError:
            return None


# ─── Row processors ───

def process_student_row(
    db: Session,
    row: list[str],
    cache: ReferenceCache,
    default_password: str,
) -> Student:
    """Validate one student row and register it. Runs inside the caller's transaction."""
    first_name = validate_string(field_at(row, 0), "firstName")
    last_name = validate_string(field_at(row, 1), "lastName")
    middle_name = field_at(row, 2)
    email = validate_email(field_at(row, 3))
    date_of_birth = parse_date(field_at(row, 4), "dateOfBirth")
    roll_no = parse_int(field_at(row, 5), "rollNo")
    gender = parse_enum(Gender, field_at(row, 6), "gender")
    enrollment_number = validate_string(field_at(row, 7), "enrollmentNumber")
    enrollment_date = parse_date(field_at(row, 8), "enrollmentDate")
    class_name = validate_string(field_at(row, 9), "className")
    section_name = validate_string(field_at(row, 10), "sectionName")

    # Uniqueness must be checked live: earlier rows of this run may have taken the value
    if email_exists(db, email):
        raise DuplicateRecordError(f"User with email '{email}' already exists.")
    if enrollment_number_exists(db, enrollment_number):
        raise DuplicateRecordError(
            f"Student with enrollment number '{enrollment_number}' already exists."
        )

    section = cache.section(class_name, section_name)
    if section is None:
        raise ReferenceNotFoundError(
            f"Section not found for class '{class_name}' and section '{section_name}'."
        )

    role = cache.role(ROLE_STUDENT)
    if role is None:
        raise MissingRoleError(f"CRITICAL: {ROLE_STUDENT} not found in database.")

    return register_student(
        db,
        email=email,
        enrollment_number=enrollment_number,
        password=default_password,
        role=role,
        first_name=first_name,
        last_name=last_name,
        middle_name=middle_name,
        date_of_birth=date_of_birth,
        gender=gender,
        enrollment_date=enrollment_date,
        section=section,
        roll_no=roll_no,
    )


def process_staff_row(
    db: Session,
    row: list[str],
    cache: ReferenceCache,
    default_password: str,
) -> Staff:
    """Validate one staff row and register it. Runs inside the caller's transaction."""
    first_name = validate_string(field_at(row, 0), "firstName")
    last_name = validate_string(field_at(row, 1), "lastName")
    middle_name = field_at(row, 2)
    email = validate_email(field_at(row, 3))
    date_of_birth = parse_date(field_at(row, 4), "dateOfBirth")
    gender = parse_enum(Gender, field_at(row, 5), "gender")
    employee_id = validate_string(field_at(row, 6), "employeeId")
    joining_date = parse_date(field_at(row, 7), "joiningDate")
    job_title = validate_string(field_at(row, 8), "jobTitle")
    department = parse_enum(Department, field_at(row, 9), "department")
    staff_type = parse_enum(StaffType, field_at(row, 10), "staffType")

    if email_exists(db, email):
        raise DuplicateRecordError(f"User with email '{email}' already exists.")
    if employee_id_exists(db, employee_id):
        raise DuplicateRecordError(f"Staff with employee ID '{employee_id}' already exists.")

    role_name = staff_role_name(staff_type)
    role = cache.role(role_name)
    if role is None:
        raise MissingRoleError(f"CRITICAL: Role '{role_name}' not found in database.")

    return register_staff(
        db,
        email=email,
        employee_id=employee_id,
        password=default_password,
        role=role,
        first_name=first_name,
        last_name=last_name,
        middle_name=middle_name,
        date_of_birth=date_of_birth,
        gender=gender,
        joining_date=joining_date,
        job_title=job_title,
        department=department,
        staff_type=staff_type,
        extra_fields=row[STAFF_EXTRA_FIELDS_START:],
    )


ROW_PROCESSORS: dict[ImportKind, Callable[[Session, list[str], ReferenceCache, str], object]] = {
    ImportKind.STUDENTS: process_student_row,
    ImportKind.STAFF: process_staff_row,
}


# ─── Report accumulator ───

@dataclass
class _ImportProgress:
    status: ImportStatus = ImportStatus.PROCESSING
    success_count: int = 0
    failure_count: int = 0
    error_messages: list[str] = field(default_factory=list)

    def record_success(self) -> None:
        self.success_count += 1

    def record_failure(self, row_number: int, exc: Exception) -> None:
        message = str(exc) or exc.__class__.__name__
        self.failure_count += 1
        self.error_messages.append(f"Row {row_number}: {message}")
        if isinstance(exc, MissingRoleError):
            logger.error("Failed to process row %d: %s", row_number, message)
        else:
            logger.warning("Failed to process row %d: %s", row_number, message)

    def complete(self, last_row_number: int) -> ImportReport:
        self.status = ImportStatus.COMPLETED
        return ImportReport(
            status=self.status,
            total_rows=last_row_number - 1,  # header excluded
            success_count=self.success_count,
            failure_count=self.failure_count,
            error_messages=tuple(self.error_messages),
        )

    def fail(self, message: str) -> ImportReport:
        self.status = ImportStatus.FAILED
        self.error_messages.append(message)
        return ImportReport(status=self.status, error_messages=tuple(self.error_messages))


# ─── Orchestrator ───

def _open_rows(file_content: bytes | str):
    if isinstance(file_content, bytes):
        text = io.TextIOWrapper(io.BytesIO(file_content), encoding="utf-8-sig", newline="")
    else:
        text = io.StringIO(file_content.removeprefix("\ufeff"), newline="")
    return csv.reader(text, strict=True)


def import_users(
    session_factory: Callable[[], Session],
    file_content: bytes | str,
    user_type: str,
    default_password: str | None = None,
) -> ImportReport:
    """Import every row of a students or staff CSV.

    Args:
        session_factory: Sync sessionmaker. One session is used for the whole
            run, with a separate transaction per row.
        file_content: Raw CSV (UTF-8, optional BOM) including a header row.
        user_type: "students" or "staff", case-insensitive. Any other value
            fails each row individually.
        default_password: Password for every created account. Defaults to
            settings.BULK_IMPORT_DEFAULT_PASSWORD.

    Raises:
        MalformedImportFileError: the file has no header row.
    """
    password = default_password or settings.BULK_IMPORT_DEFAULT_PASSWORD
    kind = ImportKind.parse(user_type)
    progress = _ImportProgress()
    row_number = 1

    with session_factory() as db:
        with db.begin():
            cache = build_reference_cache(db)

        try:
            reader = _open_rows(file_content)
            if next(reader, None) is None:
                raise MalformedImportFileError("File is empty or header is missing.")

            for row in reader:
                row_number += 1
                try:
                    if kind is None:
                        raise ValueError(f"Invalid userType: {user_type}")
                    with db.begin():
                        ROW_PROCESSORS[kind](db, row, cache, password)
                    progress.record_success()
                except Exception as exc:
                    progress.record_failure(row_number, exc)
        except (csv.Error, UnicodeDecodeError) as exc:
            logger.error("Bulk import aborted after row %d: %s", row_number, exc)
            return progress.fail(f"File is not a valid CSV: {exc}")

    logger.info(
        "Bulk import of %s finished: %d rows, %d succeeded, %d failed",
        user_type, row_number - 1, progress.success_count, progress.failure_count,
    )
    return progress.complete(row_number)
