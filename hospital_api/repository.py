"""Database access for staff accounts and patient records."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Optional

from .models import Patient, Staff


class NotFoundError(LookupError):
    """Raised when a requested record does not exist."""


def connect(dsn: str) -> sqlite3.Connection:
    """Open a database connection; ``file:`` DSNs are treated as URIs."""
    if not dsn:
        raise ValueError("empty database DSN")
    return sqlite3.connect(dsn, uri=dsn.startswith("file:"), check_same_thread=False)


@dataclass(frozen=True)
class PatientSearchFilter:
    """Search criteria; empty or missing values do not restrict the search.

    ``hospital_id`` always applies: every search is scoped to one hospital.
    """

    hospital_id: int
    national_id: Optional[str] = None
    passport_id: Optional[str] = None
    first_name_en: Optional[str] = None
    middle_name_en: Optional[str] = None
    last_name_en: Optional[str] = None
    first_name_th: Optional[str] = None
    middle_name_th: Optional[str] = None
    last_name_th: Optional[str] = None
    date_of_birth: Optional[str] = None  # yyyy-mm-dd
    phone_number: Optional[str] = None
    email: Optional[str] = None


# (column, matches a substring case-insensitively), in the order they are applied.
_CRITERIA = (
    ("national_id", False),
    ("passport_id", False),
    ("first_name_en", True),
    ("middle_name_en", True),
    ("last_name_en", True),
    ("first_name_th", True),
    ("middle_name_th", True),
    ("last_name_th", True),
    ("phone_number", False),
    ("email", False),
    ("date_of_birth", False),
)

_PATIENT_COLUMNS = (
    "id",
    "first_name_th", "middle_name_th", "last_name_th",
    "first_name_en", "middle_name_en", "last_name_en",
    "date_of_birth", "patient_hn",
    "national_id", "passport_id",
    "phone_number", "email", "gender",
    "hospital_id",
)

_SELECT_PATIENTS = f"SELECT {', '.join(_PATIENT_COLUMNS)} FROM patients "


def build_search_query(criteria: PatientSearchFilter) -> tuple[str, tuple[Any, ...]]:
    """Return the SQL text and parameters for a patient search."""
    conditions: list[str] = []
    params: list[Any] = []
    for column, fuzzy in _CRITERIA:
        value = getattr(criteria, column)
        if not value:
            continue
        if fuzzy:
            conditions.append(f"{column} LIKE '%' || ? || '%'")
        else:
            conditions.append(f"{column}=?")
        params.append(value)
    conditions.append("hospital_id=?")
    params.append(criteria.hospital_id)
    return _SELECT_PATIENTS + "WHERE " + " AND ".join(conditions), tuple(params)


def _as_date(value: Any) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _patient_from_row(row: tuple[Any, ...]) -> Patient:
    record = dict(zip(_PATIENT_COLUMNS, row))
    record["date_of_birth"] = _as_date(record["date_of_birth"])
    return Patient(**record)


@dataclass(frozen=True)
class PatientRepo:
    """Patient queries against an open connection."""

    db: sqlite3.Connection

    def search(self, criteria: PatientSearchFilter) -> list[Patient]:
        """Return the patients of the criteria's hospital that match it."""
        sql, params = build_search_query(criteria)
        return [_patient_from_row(row) for row in self.db.execute(sql, params)]


@dataclass(frozen=True)
class StaffRepo:
    """Staff account storage against an open connection."""

    db: sqlite3.Connection

    def create(self, staff: Staff) -> Staff:
        """Store a new account and return it with its assigned id."""
        with self.db:
            cursor = self.db.execute(
                "INSERT INTO staff(username, password_hash, hospital_id) VALUES(?, ?, ?)",
                (staff.username, staff.password_hash, staff.hospital_id),
            )
        return replace(staff, id=cursor.lastrowid)

    def get_by_username(self, username: str) -> Staff:
        """Return the account with this username or raise NotFoundError."""
        row = self.db.execute(
            "SELECT id, username, password_hash, hospital_id FROM staff WHERE username=?",
            (username,),
        ).fetchone()
        if row is None:
            raise NotFoundError(f"no staff with username {username!r}")
        staff_id, name, password_hash, hospital_id = row
        return Staff(id=staff_id, username=name, password_hash=password_hash, hospital_id=hospital_id)