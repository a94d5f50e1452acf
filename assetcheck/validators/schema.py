"""JSON Schema definitions for assetlinks.json.

The schema is split into five named documents that reference each other by
``$id``. They are registered in a ``referencing.Registry`` so the validator
can resolve ``$ref`` without any network or filesystem access.
"""

from jsonschema import Draft202012Validator
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

BASE_SCHEMA_ID = "/Base"

SCHEMA_BASE = {
    "$id": BASE_SCHEMA_ID,
    "type": "array",
    "items": {"$ref": "/BaseEntity"},
}

SCHEMA_ENTITY = {
    "$id": "/BaseEntity",
    "type": "object",
    "properties": {
        "relation": {"$ref": "/RelationEntity"},
        # Exclusive: a target matching both variants is as invalid as one matching neither
        "target": {
            "oneOf": [
                {"$ref": "/WebTarget"},
                {"$ref": "/AndroidTarget"},
            ],
        },
    },
    "required": ["relation", "target"],
}

SCHEMA_RELATION = {
    "$id": "/RelationEntity",
    "type": "array",
    "items": {"type": "string"},
    "minItems": 1,
}

SCHEMA_WEB = {
    "$id": "/WebTarget",
    "type": "object",
    "properties": {
        "namespace": {"type": "string", "const": "web"},
        "site": {"type": "string"},
    },
    "required": ["namespace", "site"],
    "additionalProperties": False,
}

SCHEMA_ANDROID = {
    "$id": "/AndroidTarget",
    "type": "object",
    "properties": {
        "namespace": {"type": "string", "const": "android_app"},
        "package_name": {"type": "string"},
        "sha256_cert_fingerprints": {
            "type": "array",
            "items": {"type": "string"},
            "minItems": 1,
        },
    },
    "required": ["namespace", "package_name", "sha256_cert_fingerprints"],
    "additionalProperties": False,
}

# The first entry is the document root
SCHEMAS = {
    BASE_SCHEMA_ID: SCHEMA_BASE,
    "/BaseEntity": SCHEMA_ENTITY,
    "/RelationEntity": SCHEMA_RELATION,
    "/WebTarget": SCHEMA_WEB,
    "/AndroidTarget": SCHEMA_ANDROID,
}


def build_registry() -> Registry:
    """Register every sub-schema under its ``$id``."""
    return Registry().with_resources(
        (schema_id, Resource.from_contents(schema, default_specification=DRAFT202012))
        for schema_id, schema in SCHEMAS.items()
    )


def build_validator() -> Draft202012Validator:
    """Return a validator for the root schema with all references resolvable."""
    return Draft202012Validator(SCHEMAS[BASE_SCHEMA_ID], registry=build_registry())
