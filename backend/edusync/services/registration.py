"""Persist bulk-imported users.

These helpers only write. Field validation, uniqueness checks and
reference resolution happen in the bulk importer before they are called,
and the caller owns the transaction: each helper flushes but never commits.
"""
import logging
from collections.abc import Sequence
from datetime import date

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from edusync.core.security import hash_password
from edusync.models.enrollment import Staff, Student
from edusync.models.enums import Department, Gender, StaffType
from edusync.models.user import User, UserProfile
from edusync.services.csv_validation import field_at, optional_string, parse_optional_int
from edusync.services.reference_cache import CachedRole, CachedSection

logger = logging.getLogger(__name__)

# Positions inside the trailing staff fields (CSV columns 11+)
STAFF_OFFICE_LOCATION = 0
STAFF_QUALIFICATION = 1
STAFF_YEARS_OF_EXPERIENCE = 2


# ─── Uniqueness checks ───

def email_exists(db: Session, email: str) -> bool:
    return db.execute(select(exists().where(User.email == email))).scalar()


def enrollment_number_exists(db: Session, enrollment_number: str) -> bool:
    return db.execute(
        select(exists().where(Student.enrollment_number == enrollment_number))
    ).scalar()


def employee_id_exists(db: Session, employee_id: str) -> bool:
    return db.execute(select(exists().where(Staff.employee_id == employee_id))).scalar()


# ─── Writes ───

def _create_user(
    db: Session,
    *,
    username: str,
    email: str,
    password: str,
    role: CachedRole,
    first_name: str,
    last_name: str,
    middle_name: str | None,
    date_of_birth: date,
    gender: Gender,
) -> User:
    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        role_id=role.id,
        is_active=True,
    )
    db.add(user)
    db.flush()

    db.add(UserProfile(
        user_id=user.id,
        first_name=first_name,
        last_name=last_name,
        middle_name=optional_string(middle_name),
        date_of_birth=date_of_birth,
        gender=gender,
    ))
    return user


def register_student(
    db: Session,
    *,
    email: str,
    enrollment_number: str,
    password: str,
    role: CachedRole,
    first_name: str,
    last_name: str,
    middle_name: str | None,
    date_of_birth: date,
    gender: Gender,
    enrollment_date: date,
    section: CachedSection,
    roll_no: int,
) -> Student:
    """Create user + profile + student. The enrollment number doubles as username."""
    user = _create_user(
        db,
        username=enrollment_number,
        email=email,
        password=password,
        role=role,
        first_name=first_name,
        last_name=last_name,
        middle_name=middle_name,
        date_of_birth=date_of_birth,
        gender=gender,
    )
    student = Student(
        user_id=user.id,
        enrollment_number=enrollment_number,
        enrollment_date=enrollment_date,
        roll_no=roll_no,
        section_id=section.id,
    )
    db.add(student)
    db.flush()
    logger.debug("Registered student %s in %s:%s", enrollment_number, section.class_name, section.section_name)
    return student


def register_staff(
    db: Session,
    *,
    email: str,
    employee_id: str,
    password: str,
    role: CachedRole,
    first_name: str,
    last_name: str,
    middle_name: str | None,
    date_of_birth: date,
    gender: Gender,
    joining_date: date,
    job_title: str,
    department: Department,
    staff_type: StaffType,
    extra_fields: Sequence[str] = (),
) -> Staff:
    """Create user + profile + staff record.

    ``extra_fields`` are the raw CSV columns after ``staffType``, in order:
    officeLocation, qualification, yearsOfExperience. All are optional.
    """
    extra = list(extra_fields)
    years_of_experience = parse_optional_int(
        field_at(extra, STAFF_YEARS_OF_EXPERIENCE), "yearsOfExperience", minimum=0
    )

    user = _create_user(
        db,
        username=employee_id,
        email=email,
        password=password,
        role=role,
        first_name=first_name,
        last_name=last_name,
        middle_name=middle_name,
        date_of_birth=date_of_birth,
        gender=gender,
    )
    staff = Staff(
        user_id=user.id,
        employee_id=employee_id,
        joining_date=joining_date,
        job_title=job_title,
        department=department,
        staff_type=staff_type,
        office_location=optional_string(field_at(extra, STAFF_OFFICE_LOCATION)),
        qualification=optional_string(field_at(extra, STAFF_QUALIFICATION)),
        years_of_experience=years_of_experience,
    )
    db.add(staff)
    db.flush()
    logger.debug("Registered staff %s as %s", employee_id, role.name)
    return staff
