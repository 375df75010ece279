# hospital_api

A small Flask application for hospital staff. Staff members register and log
in with a username and password. A successful login returns a signed token,
and that token is needed to search patient records. Every search is limited
to the hospital the logged-in staff member belongs to.

Data is kept in SQLite through the standard library's `sqlite3` module.

## Building the application

`create_app(db, jwt_secret)` in `hospital_api.app` returns a Flask
application. `db` is an open `sqlite3.Connection`, for example one from
`hospital_api.repository.connect(dsn)`. `connect` opens the database named by
`dsn` (a file path, `":memory:"`, or a `file:` URI), allows the connection to
be used from other threads, and raises `ValueError` for an empty DSN.
`jwt_secret` is the key used to sign and check tokens.

```python
from hospital_api.app import create_app
from hospital_api.repository import connect

db = connect("hospital.db")
app = create_app(db, "secret")
app.run(port=8080)
```

## Database tables

The application reads and writes two tables, `staff` and `patients`, which
must already exist (see "What the package does not do"). A schema that fits
the queries the package runs:

```sql
CREATE TABLE staff (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    username      TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    hospital_id   INTEGER NOT NULL
);

CREATE TABLE patients (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    first_name_th  TEXT,
    middle_name_th TEXT,
    last_name_th   TEXT,
    first_name_en  TEXT,
    middle_name_en TEXT,
    last_name_en   TEXT,
    date_of_birth  TEXT,
    patient_hn     TEXT,
    national_id    TEXT,
    passport_id    TEXT,
    phone_number   TEXT,
    email          TEXT,
    gender         TEXT,
    hospital_id    INTEGER NOT NULL
);
```

A `UNIQUE` constraint on `staff.username` is what makes a second
registration with the same username fail. Dates of birth are read from the
first ten characters of the stored value as `yyyy-mm-dd`.

## Endpoints

### `POST /staff/create`

Registers a staff member. The password is stored as a bcrypt hash (cost 10).

```json
{"username": "alice", "password": "password", "hospital": 1}
```

`username` and `password` must be non-empty strings. `hospital` is an
optional integer and defaults to `0`.

| Result | Response |
| --- | --- |
| Created | `201 {"id": <new staff id>}` |
| Body not a JSON object, `username` or `password` missing or not a string, `hospital` not an integer | `400 {"error": ...}` |
| Storage failure (such as a duplicate username) or a password longer than 72 bytes | `500 {"error": ...}` |

### `POST /staff/login`

```json
{"username": "alice", "password": "password"}
```

| Result | Response |
| --- | --- |
| Credentials accepted | `200 {"token": "..."}` |
| Body not a JSON object, `username` or `password` missing or not a string | `400 {"error": ...}` |
| Unknown user, wrong password, or a storage failure | `401 {"error": "invalid credentials"}` |

The token is an HS256 JWT with these claims:

- `sid`: the staff id
- `hid`: the hospital id
- `exp`: expiry, 72 hours after issue

### `GET /patient/search`

The request must carry the token in an `Authorization` header, as in
`Authorization: Bearer token`. If the header is absent, or does not start
with `Bearer `, the response is `401 {"error": "missing token"}`. If the
token fails verification (bad signature, expired, or `sid`/`hid` missing or
not numbers), the response is `401 {"error": "invalid token"}`. Tokens signed
with HS256, HS384 or HS512 are accepted.

Optional query parameters narrow the search:

| Parameter | How it matches |
| --- | --- |
| `national_id`, `passport_id` | exact |
| `first_name_en`, `middle_name_en`, `last_name_en` | substring, with SQLite `LIKE` |
| `first_name_th`, `middle_name_th`, `last_name_th` | substring, with SQLite `LIKE` |
| `phone_number`, `email` | exact |
| `date_of_birth` | exact, `yyyy-mm-dd` |

SQLite's `LIKE` ignores case for ASCII letters only. Empty parameters are
ignored. Results are always restricted to the hospital in the token's `hid`
claim. The response is `200` with a JSON list of patient records, possibly
empty; a storage failure gives `500 {"error": ...}`.

Each patient record has the keys `id`, `hospital_id`, `first_name_th`,
`middle_name_th`, `last_name_th`, `first_name_en`, `middle_name_en`,
`last_name_en`, `date_of_birth` (ISO date string), `patient_hn`,
`national_id`, `passport_id`, `phone_number`, `email` and `gender`; unknown
values are `null`.

## Using the layers directly

- `hospital_api.models`: the frozen `Patient` and `Staff` dataclasses.
  `Patient.to_dict()` gives the JSON form of a patient. A `Staff` has `id`
  `0` until it has been stored.
- `hospital_api.repository`: `PatientRepo(db).search(criteria)` takes a
  `PatientSearchFilter` and returns a list of `Patient`.
  `StaffRepo(db).create(staff)` stores a `Staff` and returns a copy carrying
  its new id; `StaffRepo(db).get_by_username(username)` raises
  `NotFoundError` when no staff member has that username.
  `build_search_query(criteria)` returns the SQL text and parameters for a
  search without running it.
- `hospital_api.services`: `StaffService(repo).create(username, password,
  hospital_id)` hashes the password and stores the staff member, raising
  `ValueError` for a password longer than 72 bytes.
  `StaffService(repo).authenticate(username, password)` raises
  `InvalidCredentialsError` for an unknown username or a wrong password.
  `PatientService(repo).search(criteria)` runs a patient search.
- `hospital_api.auth`: `issue_token(staff, secret)` creates a token and
  `decode_token(token, secret)` returns `(staff_id, hospital_id)` or raises
  `TokenError`. `require_auth(secret)` is a decorator for Flask views that
  checks the bearer token and sets `flask.g.staff_id` and
  `flask.g.hospital_id`.

## What the package does not do

- It does not create the `staff` and `patients` tables or migrate a
  database; the tables must be set up before the application is used.
- It has no command of its own for starting a server. Build the application
  with `create_app` and serve it with Flask's development server or any WSGI
  server.
- It has no endpoints for adding, changing or deleting patient records.

## Tests

The test suite uses pytest and is installed with the `test` extra.