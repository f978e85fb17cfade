from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from edusync.db.base import Base, TimestampMixin


class AcademicClass(Base, TimestampMixin):
    __tablename__ = "academic_classes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False, default=uuid4, index=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    sections: Mapped[list["Section"]] = relationship(
        "Section", back_populates="academic_class", lazy="selectin", order_by="Section.section_name"
    )


class Section(Base, TimestampMixin):
    __tablename__ = "sections"
    __table_args__ = (UniqueConstraint("class_id", "section_name", name="uq_sections_class_section"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False, default=uuid4)
    section_name: Mapped[str] = mapped_column(String(50), nullable=False)
    class_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("academic_classes.id", ondelete="CASCADE"), nullable=False, index=True
    )

    academic_class: Mapped["AcademicClass"] = relationship("AcademicClass", back_populates="sections")
