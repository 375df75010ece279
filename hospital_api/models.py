"""Domain records for hospital staff and patients."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Optional


@dataclass(frozen=True, kw_only=True)
class Patient:
    """A patient registered at one hospital; unknown details are None."""

    id: int
    hospital_id: int
    first_name_th: Optional[str] = None
    middle_name_th: Optional[str] = None
    last_name_th: Optional[str] = None
    first_name_en: Optional[str] = None
    middle_name_en: Optional[str] = None
    last_name_en: Optional[str] = None
    date_of_birth: Optional[date] = None
    patient_hn: Optional[str] = None
    national_id: Optional[str] = None
    passport_id: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping, with the birth date in ISO form."""
        data = asdict(self)
        if self.date_of_birth is not None:
            data["date_of_birth"] = self.date_of_birth.isoformat()
        return data


@dataclass(frozen=True, kw_only=True)
class Staff:
    """A staff account; ``id`` is 0 until the account has been stored."""

    username: str
    password_hash: str
    hospital_id: int
    id: int = 0