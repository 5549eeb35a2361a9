"""
Closed value sets shared by the ORM models and the request schemas.
Stored values are the commission's own (Indonesian) terms.
"""
import enum

from sqlalchemy import Enum as SQLEnum


class DisputeStatus(str, enum.Enum):
    NEW = "baru"
    IN_PROGRESS = "sedang_berjalan"
    RESOLVED = "selesai"
    CLOSED = "ditutup"


class DisputeType(str, enum.Enum):
    INFORMATION_DISPUTE = "sengketa_informasi"
    OBJECTION = "keberatan"
    APPEAL = "banding"


class PartyType(str, enum.Enum):
    INDIVIDUAL = "individu"
    LEGAL_ENTITY = "badan_hukum"


class PartyRole(str, enum.Enum):
    APPLICANT = "pemohon"
    RESPONDENT = "termohon"
    CO_RESPONDENT = "turut_termohon"


class UserRole(str, enum.Enum):
    STAFF = "staf_komisi"
    COMMISSIONER = "komisioner"
    REGISTRAR = "panitera"
    APPLICANT = "pemohon"
    PUBLIC_BODY = "badan_publik"


def sql_enum(enum_cls, name: str):
    """Column type storing the member values and rejecting anything outside the set."""
    return SQLEnum(
        enum_cls,
        name=name,
        values_callable=lambda members: [member.value for member in members],
        create_constraint=True,
        validate_strings=True,
    )
