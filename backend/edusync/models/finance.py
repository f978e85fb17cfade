from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from edusync.db.base import Base, TimestampMixin
from edusync.models.enums import FeeFrequency


class FeeType(Base):
    __tablename__ = "fee_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class FeeStructure(Base, TimestampMixin):
    __tablename__ = "fee_structures"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    academic_year: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    particulars: Mapped[list["FeeParticular"]] = relationship(
        "FeeParticular", back_populates="fee_structure", lazy="selectin", order_by="FeeParticular.id"
    )


class FeeParticular(Base):
    __tablename__ = "fee_particulars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    frequency: Mapped[FeeFrequency] = mapped_column(
        SAEnum(FeeFrequency, native_enum=False, length=20), nullable=False
    )
    fee_type_id: Mapped[int] = mapped_column(Integer, ForeignKey("fee_types.id"), nullable=False, index=True)
    fee_structure_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("fee_structures.id", ondelete="CASCADE"), nullable=False, index=True
    )

    fee_type: Mapped["FeeType"] = relationship("FeeType", lazy="selectin")
    fee_structure: Mapped["FeeStructure"] = relationship("FeeStructure", back_populates="particulars")
