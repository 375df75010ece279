"""Business operations for staff accounts and patient search."""

from __future__ import annotations

from dataclasses import dataclass

import bcrypt

from .models import Patient, Staff
from .repository import NotFoundError, PatientRepo, PatientSearchFilter, StaffRepo

_BCRYPT_COST = 10
_BCRYPT_MAX_PASSWORD_BYTES = 72


class InvalidCredentialsError(Exception):
    """Raised when a username and password do not match an account."""

    def __init__(self, message: str = "invalid credentials") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PatientService:
    """Patient lookups."""

    repo: PatientRepo

    def search(self, criteria: PatientSearchFilter) -> list[Patient]:
        """Return the patients matching the criteria."""
        return self.repo.search(criteria)


@dataclass(frozen=True)
class StaffService:
    """Staff registration and authentication."""

    repo: StaffRepo

    def create(self, username: str, password: str, hospital_id: int) -> Staff:
        """Register an account with a bcrypt-hashed password."""
        secret = password.encode()
        if len(secret) > _BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError("password length exceeds 72 bytes")
        password_hash = bcrypt.hashpw(secret, bcrypt.gensalt(rounds=_BCRYPT_COST)).decode()
        return self.repo.create(
            Staff(username=username, password_hash=password_hash, hospital_id=hospital_id)
        )

    def authenticate(self, username: str, password: str) -> Staff:
        """Return the account if the password matches, else raise InvalidCredentialsError."""
        try:
            staff = self.repo.get_by_username(username)
        except NotFoundError as exc:
            raise InvalidCredentialsError() from exc
        try:
            matches = bcrypt.checkpw(password.encode(), staff.password_hash.encode())
        except ValueError:
            matches = False
        if not matches:
            raise InvalidCredentialsError()
        return staff