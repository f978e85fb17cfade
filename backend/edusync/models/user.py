import uuid
from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from edusync.db.base import Base, TimestampMixin, UUIDMixin
from edusync.models.enums import Gender, StaffType

ROLE_ADMIN = "ROLE_ADMIN"
ROLE_STUDENT = "ROLE_STUDENT"


def staff_role_name(staff_type: StaffType) -> str:
    """Role granted to imported staff of ``staff_type``: "ROLE_<TYPE>"."""
    return f"ROLE_{staff_type.name}"


DEFAULT_ROLES = tuple(dict.fromkeys(
    [ROLE_ADMIN, ROLE_STUDENT, *(staff_role_name(t) for t in StaffType)]
))


class Role(Base):
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)


class User(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    role_id: Mapped[int] = mapped_column(Integer, ForeignKey("roles.id"), nullable=False, index=True)

    role: Mapped["Role"] = relationship("Role", lazy="joined")
    profile: Mapped["UserProfile"] = relationship(
        "UserProfile", back_populates="user", uselist=False
    )

    @property
    def role_name(self) -> str:
        return self.role.name


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    middle_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[Gender] = mapped_column(SAEnum(Gender, native_enum=False, length=20), nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="profile")
