from edusync.models.enums import Department, FeeFrequency, Gender, StaffType
from edusync.models.user import Role, User, UserProfile
from edusync.models.academic import AcademicClass, Section
from edusync.models.enrollment import Staff, Student
from edusync.models.finance import FeeParticular, FeeStructure, FeeType

__all__ = [
    "Department", "FeeFrequency", "Gender", "StaffType",
    "Role", "User", "UserProfile",
    "AcademicClass", "Section",
    "Staff", "Student",
    "FeeParticular", "FeeStructure", "FeeType",
]
