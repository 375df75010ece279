import time

import jwt
import pytest
from flask import Flask, g, jsonify

from hospital_api.auth import TokenError, decode_token, issue_token, require_auth
from hospital_api.models import Staff

SECRET = "secret"
ALGORITHM = "HS256"


def _client(guard):
    app = Flask(__name__)

    @app.get("/whoami")
    @guard
    def whoami():
        return jsonify(staff=g.staff_id, hospital=g.hospital_id)

    return app.test_client()


def _staff():
    return Staff(id=5, username="alice", password_hash="placeholder", hospital_id=3)


def _encode(claims):
    return jwt.encode(claims, SECRET, algorithm=ALGORITHM)


def test_issue_and_decode_round_trip():
    token = issue_token(_staff(), SECRET)
    assert decode_token(token, SECRET) == (5, 3)


def test_issued_token_uses_hs256_and_72_hour_expiry():
    before = int(time.time())
    token = issue_token(_staff(), SECRET)
    assert jwt.get_unverified_header(token)["alg"] == "HS256"
    claims = jwt.decode(token, SECRET, algorithms=[ALGORITHM])
    assert claims["sid"] == 5
    assert claims["hid"] == 3
    lifetime = 72 * 3600
    assert before + lifetime <= claims["exp"] <= int(time.time()) + lifetime


def test_decode_rejects_wrong_secret():
    token = issue_token(_staff(), SECRET)
    with pytest.raises(TokenError):
        decode_token(token, "placeholder")


def test_decode_rejects_expired_token():
    claims = {"sid": 1, "hid": 1, "exp": int(time.time()) - 60}
    token = _encode(claims)
    with pytest.raises(TokenError):
        decode_token(token, SECRET)


def test_decode_rejects_garbage():
    with pytest.raises(TokenError):
        decode_token("token", SECRET)


def test_decode_requires_claims():
    claims = {"sid": 1}
    token = _encode(claims)
    with pytest.raises(TokenError):
        decode_token(token, SECRET)


def test_decode_accepts_float_claims():
    claims = {"sid": 2.0, "hid": 1.0}
    token = _encode(claims)
    assert decode_token(token, SECRET) == (2, 1)


def test_guard_without_header():
    client = _client(require_auth(SECRET))
    response = client.get("/whoami")
    assert response.status_code == 401
    assert response.get_json() == {"error": "missing token"}


def test_guard_with_non_bearer_header():
    client = _client(require_auth(SECRET))
    response = client.get("/whoami", headers={"Authorization": "Basic token"})
    assert response.status_code == 401
    assert response.get_json() == {"error": "missing token"}


def test_guard_with_invalid_token():
    client = _client(require_auth(SECRET))
    response = client.get("/whoami", headers={"Authorization": "Bearer token"})
    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid token"}


def test_guard_passes_identity_to_view():
    client = _client(require_auth(SECRET))
    token = issue_token(_staff(), SECRET)
    response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.get_json() == {"staff": 5, "hospital": 3}