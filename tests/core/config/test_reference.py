# tests/core/config/test_reference.py
"""
Testes da decodificação de `custom.parent` (ParentReference).

Os testes asseguram que:
- a ausência do bloco resulta nos defaults (maxLevels=3, override ligado)
- valores declarados são preservados
- apenas `overwriteServiceConfig: false` explícito desliga o override
- tipos inválidos são rejeitados sem coerção
"""

import pytest

try:
    from serverless_parent.core.config.reference import (
        DEFAULT_MAX_LEVELS,
        ParentReference,
    )
    from serverless_parent.core.config.errors import InvalidParentReferenceError
except Exception as e:  # noqa: BLE001
    ParentReference = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing parent reference module. Implement:\n"
            "- src/serverless_parent/core/config/reference.py (ParentReference)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "document",
    [
        {},
        {"custom": None},
        {"custom": {}},
        {"custom": {"parent": None}},
        {"custom": {"parent": {}}},
    ],
)
def test_defaults_when_block_absent(document):
    _require_imports()

    ref = ParentReference.from_document(document)

    assert ref.path is None
    assert ref.max_levels == DEFAULT_MAX_LEVELS == 3
    assert ref.overwrite_service_config is True


def test_declared_values_are_decoded():
    _require_imports()

    ref = ParentReference.from_document(
        {
            "custom": {
                "parent": {
                    "path": "../shared",
                    "maxLevels": 5,
                    "overwriteServiceConfig": False,
                }
            }
        }
    )

    assert ref == ParentReference(
        path="../shared", max_levels=5, overwrite_service_config=False
    )
    assert ref.to_dict() == {
        "path": "../shared",
        "maxLevels": 5,
        "overwriteServiceConfig": False,
    }


def test_null_fields_fall_back_to_defaults():
    _require_imports()

    ref = ParentReference.from_document(
        {"custom": {"parent": {"path": None, "maxLevels": None, "overwriteServiceConfig": None}}}
    )

    assert ref == ParentReference()


def test_decoding_does_not_mutate_document():
    _require_imports()

    document = {"custom": {"parent": {"maxLevels": 2}}}

    ParentReference.from_document(document)

    assert document == {"custom": {"parent": {"maxLevels": 2}}}


@pytest.mark.parametrize(
    "document",
    [
        {"custom": "shared"},
        {"custom": {"parent": "../shared"}},
        {"custom": {"parent": ["../shared"]}},
        {"custom": {"parent": {"path": ""}}},
        {"custom": {"parent": {"path": 42}}},
        {"custom": {"parent": {"maxLevels": 0}}},
        {"custom": {"parent": {"maxLevels": -1}}},
        {"custom": {"parent": {"maxLevels": "3"}}},
        {"custom": {"parent": {"maxLevels": True}}},
        {"custom": {"parent": {"overwriteServiceConfig": "false"}}},
        {"custom": {"parent": {"overwriteServiceConfig": 0}}},
    ],
)
def test_invalid_values_raise(document):
    """
    Verifica que tipos inválidos em `custom.parent` são rejeitados.

    Decisões arquiteturais:
        - Nenhuma coerção de tipos (ex.: "false" não vira False)
        - A falha acontece antes de qualquer acesso ao filesystem
    """
    _require_imports()

    with pytest.raises(InvalidParentReferenceError):
        ParentReference.from_document(document)
