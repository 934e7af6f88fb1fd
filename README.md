# weddinggame

Building blocks for the HTTP API of a wedding party game: a family of
application errors, a WSGI middleware that adds CORS headers, functions
that turn errors into JSON responses, and a validator for uploaded images.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

`weddinggame.config.MAX_UPLOAD_SIZE` is the largest accepted upload in
bytes: 1048576 (1 MiB).

## Errors

`weddinggame.errors` defines `AppError` and its subclasses:

| Class                      | Message                              |
|----------------------------|--------------------------------------|
| `AuthenticationError`      | given by the caller                  |
| `AuthorizationError`       | `access denied` by default           |
| `AccessTokenNotFoundError` | `access token not found` by default  |
| `DatabaseError`            | given by the caller                  |
| `NotFoundError`            | `<entity> with key <key> not found.` |
| `RecordNotFoundError`      | given by the caller                  |
| `StorageError`             | given by the caller                  |
| `ValidationError`          | given by the caller                  |

Every error has a `message` attribute and a class-level `code` naming its
kind, and `str(error)` gives the message. `NotFoundError` also keeps the
`entity` and `key` it was built from.

```python
from weddinggame.errors import NotFoundError

error = NotFoundError("challenge", "42")
str(error)   # 'challenge with key 42 not found.'
error.code   # 'NotFoundError'
```

## CORS middleware

`weddinggame.cors.CORSMiddleware` wraps any WSGI application. It puts these
headers on every response, replacing any the application set under the same
names:

* `Access-Control-Allow-Origin: *`
* `Access-Control-Allow-Credentials: true`
* `Access-Control-Allow-Headers: Content-Type, Content-Length, Accept-Encoding, X-CSRF-Token, Authorization, accept, origin, Cache-Control, X-Requested-With`
* `Access-Control-Allow-Methods: POST, OPTIONS, GET, PUT`

`OPTIONS` requests are answered with `204 No Content` and the headers above,
without calling the wrapped application.

```python
from weddinggame.cors import CORSMiddleware

app = CORSMiddleware(app)
```

## Error responses

`weddinggame.error_handler.handle_error(error)` maps an exception to a
`(status, payload)` pair, or returns `None` when `error` is `None`:

* `AuthenticationError`, `AuthorizationError`, `AccessTokenNotFoundError`:
  `403`, message `access denied`;
* `ValidationError`, and any error whose text contains
  `Error:Field validation for`: `400`, with the error's own message;
* `NotFoundError`: `404`, with the error's own message;
* anything else: `500`, message `An unexpected error occurred.`; the
  original error is logged at error level.

The payload is always `{"status": "error", "message": ...}`.

`error_response(error)` returns the same result as a Werkzeug `Response`
with an `application/json` body written compactly with sorted keys, for
example `{"message":"access denied","status":"error"}`, or `None` when
`error` is `None`.

## Upload validation

`weddinggame.upload.validate_upload_image_request(request)` takes a
Werkzeug `Request` and returns the `FileStorage` sent in the `image` form
field, with its `filename` cut down to the part after the last `/`. It
raises `ValidationError` with one of these messages:

* `image is required` when there is no `image` field;
* `file must be an image` when the file name does not end in `.jpg`,
  `.jpeg` or `.png` (case-sensitive);
* `file is empty` when the file has no bytes;
* `maximum file size is 1048576 bytes` when it is larger than
  `MAX_UPLOAD_SIZE`.

`is_allowed_extension(filename)` checks the extension alone.

## What this package does not do

It has no server, routes or command to start one, no database access, and
no lookup of users from access tokens: it supplies the errors, middleware
and validation that such an application is built from.