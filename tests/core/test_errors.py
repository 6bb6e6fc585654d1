# tests/core/test_errors.py
"""
Testes do payload canônico de erro (ErrorPayload).

Os testes asseguram que:
- cada exceção tipada é mapeada para um código estável
- o payload é serializável (`to_dict`)
- exceções desconhecidas não se perdem (tipo e mensagem preservados)
"""

import json

import pytest

try:
    from serverless_parent.core.errors import (
        CONFIG_ERROR,
        PARENT_LOAD_FAILED,
        PARENT_NOT_DISCOVERED,
        PARENT_REFERENCE_INVALID,
        ErrorPayload,
        exception_to_error,
    )
    from serverless_parent.core.config.errors import (
        ConfigNotFoundError,
        ConfigTypeConflictError,
        InvalidParentReferenceError,
        ParentDiscoveryError,
    )
except Exception as e:  # noqa: BLE001
    exception_to_error = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing error payloads. Implement:\n"
            "- src/serverless_parent/core/errors.py (ErrorPayload, exception_to_error)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_discovery_error_payload():
    _require_imports()

    exc = ParentDiscoveryError("nope", start_dir="/srv/orders", probed=["/srv/serverless.yml"])

    payload = exception_to_error(exc)

    assert isinstance(payload, ErrorPayload)
    assert payload.type == PARENT_NOT_DISCOVERED
    assert payload.details == {"start_dir": "/srv/orders", "probed": ["/srv/serverless.yml"]}
    assert payload.hint


def test_load_error_payload():
    _require_imports()

    payload = exception_to_error(ConfigNotFoundError("missing", path="/srv/shared/serverless.yml"))

    assert payload.type == PARENT_LOAD_FAILED
    assert payload.details["path"] == "/srv/shared/serverless.yml"
    assert payload.details["exc_type"] == "ConfigNotFoundError"


def test_reference_error_payload():
    _require_imports()

    payload = exception_to_error(InvalidParentReferenceError("bad maxLevels"))

    assert payload.type == PARENT_REFERENCE_INVALID
    assert payload.details == {"reason": "bad maxLevels"}


def test_generic_config_error_payload():
    _require_imports()

    payload = exception_to_error(ConfigTypeConflictError("root"))

    assert payload.type == CONFIG_ERROR
    assert payload.details == {"exc_type": "ConfigTypeConflictError"}


def test_unknown_exception_keeps_type_and_message():
    _require_imports()

    payload = exception_to_error(PermissionError("denied"))

    assert payload.details["exc_type"] == "PermissionError"
    assert payload.details["exc_message"] == "denied"


def test_payload_is_json_serializable():
    _require_imports()

    payload = exception_to_error(ParentDiscoveryError("nope", start_dir="/x", probed=[]))

    assert json.loads(json.dumps(payload.to_dict()))["type"] == PARENT_NOT_DISCOVERED
