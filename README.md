# cmmcore

Building blocks for a JSON web service, each usable on its own:

- `cmmcore.apperrors` – numeric error codes (`ErrorType`) and `CustomError`
  exceptions that carry a code, a message, a cause and a context mapping;
  `initialize()` loads the default message for each code.
- `cmmcore.apiwrapper` – the `APIResponse` envelope (`status`, `code`,
  `message`, `data`, `error`), `success_response`, `error_response`, and
  `render`, which returns the HTTP status and JSON-ready body.
- `cmmcore.config` – `ServerConfig`, `DBConfig`, `ServicesConfig` and
  `CorsConfig` read from environment variables by `init_config()`, with
  defaults when a variable is absent.
- `cmmcore.mathutil`, `cmmcore.randutil`, `cmmcore.strtool` – rounding,
  aggregates, number theory, random values and small string helpers.
- `cmmcore.slicetool_query`, `cmmcore.slicetool_ops` – list helpers such as
  `chunk`, `difference`, `group_by`, `union`, `intersection`, `sort_by`
  and `partition`.
- `cmmcore.converter` – strict integer, float and boolean parsing and
  formatting, `any_to_bytes`, `as_string`, and copying values into
  dataclasses by their `"json"` field metadata.
- `cmmcore.loglevel` – `Level` and ANSI-coloured level and caller labels.
- `cmmcore.encoder` – Base64 and JSON helpers with AES and DES (CFB mode)
  and RSA (PKCS#1 v1.5) encryption, via pycryptodome.
- `cmmcore.timeutils` – GMT+07 conversions and formatting with
  reference-time layouts, `Date` and `DateTime` values with JSON forms, and
  Vietnamese weekday names.

## Installing

```
pip install .
```

## Examples

```python
from cmmcore import apperrors, apiwrapper

apperrors.initialize()

try:
    raise apperrors.ErrorType.BAD_REQUEST_ERR.newm("missing field")
except apperrors.CustomError as exc:
    response = apiwrapper.error_response(apperrors.get_error_type(exc), str(exc))
    status, body = apiwrapper.render(response)
    # status == HTTPStatus.BAD_REQUEST
```

```python
from cmmcore import config

config.init_config({"PORT": "9000"})
assert config.server_config().http_port == 9000
```

```python
from cmmcore import encoder

generated = encoder.generate_aes_key(32)
sealed = encoder.encode_json_with_key({"id": 1}, generated, encoder.EncryptionType.AES)
assert encoder.decode_json_with_key(sealed, generated, encoder.EncryptionType.AES) == {"id": 1}
```

## What it does not do

The package holds no HTTP server, router or middleware, no websocket hub,
no outgoing HTTP client, and no database or cache connection. `apiwrapper`
only builds response bodies and picks status codes; sending them is left to
whatever web framework you use. `config` reads database settings but never
connects. There is no logger setup beyond the level labels in `loglevel`.

## Running the tests

```
pip install .[test]
pytest
```