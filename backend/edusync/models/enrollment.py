import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from edusync.db.base import Base, TimestampMixin
from edusync.models.enums import Department, StaffType

if TYPE_CHECKING:
    from edusync.models.academic import Section
    from edusync.models.user import User


class Student(Base, TimestampMixin):
    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    enrollment_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    enrollment_date: Mapped[date] = mapped_column(Date, nullable=False)
    roll_no: Mapped[int] = mapped_column(Integer, nullable=False)
    section_id: Mapped[int] = mapped_column(Integer, ForeignKey("sections.id"), nullable=False, index=True)

    user: Mapped["User"] = relationship("User")
    section: Mapped["Section"] = relationship("Section")


class Staff(Base, TimestampMixin):
    __tablename__ = "staff"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    employee_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    joining_date: Mapped[date] = mapped_column(Date, nullable=False)
    job_title: Mapped[str] = mapped_column(String(100), nullable=False)
    department: Mapped[Department] = mapped_column(
        SAEnum(Department, native_enum=False, length=30), nullable=False
    )
    staff_type: Mapped[StaffType] = mapped_column(
        SAEnum(StaffType, native_enum=False, length=30), nullable=False
    )
    office_location: Mapped[str | None] = mapped_column(String(100), nullable=True)
    qualification: Mapped[str | None] = mapped_column(String(255), nullable=True)
    years_of_experience: Mapped[int | None] = mapped_column(Integer, nullable=True)

    user: Mapped["User"] = relationship("User")
