import enum


class Gender(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class Department(str, enum.Enum):
    ACADEMICS = "ACADEMICS"
    ADMINISTRATION = "ADMINISTRATION"
    FINANCE = "FINANCE"
    LIBRARY = "LIBRARY"
    SPORTS = "SPORTS"
    IT = "IT"
    TRANSPORT = "TRANSPORT"


class StaffType(str, enum.Enum):
    # Each staff type maps to a role named "ROLE_<TYPE>"
    TEACHER = "TEACHER"
    PRINCIPAL = "PRINCIPAL"
    LIBRARIAN = "LIBRARIAN"
    ACCOUNTANT = "ACCOUNTANT"
    ADMINISTRATOR = "ADMINISTRATOR"
    SUPPORT = "SUPPORT"


class FeeFrequency(str, enum.Enum):
    ONE_TIME = "ONE_TIME"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    ANNUALLY = "ANNUALLY"
