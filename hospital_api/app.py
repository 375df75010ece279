"""HTTP application: staff registration and login, and patient search."""

from __future__ import annotations

import sqlite3
from typing import Any, Optional

from flask import Flask, g, jsonify, request

from .auth import issue_token, require_auth
from .repository import PatientRepo, PatientSearchFilter, StaffRepo
from .services import InvalidCredentialsError, PatientService, StaffService

_SEARCH_FIELDS = (
    "national_id",
    "passport_id",
    "first_name_en",
    "middle_name_en",
    "last_name_en",
    "first_name_th",
    "middle_name_th",
    "last_name_th",
    "date_of_birth",
    "phone_number",
    "email",
)


class _BindError(ValueError):
    """Raised when a request body does not have the expected shape."""


def _json_body() -> dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        raise _BindError("request body must be a JSON object")
    return body


def _required_str(body: dict[str, Any], key: str) -> str:
    value = body.get(key)
    if value is None or value == "":
        raise _BindError(f"field {key!r} is required")
    if not isinstance(value, str):
        raise _BindError(f"field {key!r} must be a string")
    return value


def _optional_int(body: dict[str, Any], key: str) -> int:
    value = body.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise _BindError(f"field {key!r} must be an integer")
    return value


def _query_value(name: str) -> Optional[str]:
    return request.args.get(name) or None


def create_app(db: sqlite3.Connection, jwt_secret: str) -> Flask:
    """Build the application wired to an open database connection."""
    staff_service = StaffService(StaffRepo(db))
    patient_service = PatientService(PatientRepo(db))

    app = Flask(__name__)

    @app.post("/staff/create")
    def register() -> Any:
        try:
            body = _json_body()
            username = _required_str(body, "username")
            password = _required_str(body, "password")
            hospital_id = _optional_int(body, "hospital")
        except _BindError as exc:
            return jsonify(error=str(exc)), 400
        try:
            staff = staff_service.create(username, password, hospital_id)
        except (sqlite3.Error, ValueError) as exc:
            return jsonify(error=str(exc)), 500
        return jsonify(id=staff.id), 201

    @app.post("/staff/login")
    def login() -> Any:
        try:
            body = _json_body()
            username = _required_str(body, "username")
            password = _required_str(body, "password")
        except _BindError as exc:
            return jsonify(error=str(exc)), 400
        try:
            staff = staff_service.authenticate(username, password)
        except (InvalidCredentialsError, sqlite3.Error):
            return jsonify(error="invalid credentials"), 401
        return jsonify(token=issue_token(staff, jwt_secret)), 200

    @app.get("/patient/search")
    @require_auth(jwt_secret)
    def search_patients() -> Any:
        criteria = PatientSearchFilter(
            hospital_id=g.hospital_id,
            **{name: _query_value(name) for name in _SEARCH_FIELDS},
        )
        try:
            patients = patient_service.search(criteria)
        except (sqlite3.Error, ValueError) as exc:
            return jsonify(error=str(exc)), 500
        return jsonify([patient.to_dict() for patient in patients]), 200

    return app