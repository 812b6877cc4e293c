import jsonschema
from pydantic import BaseModel, ValidationError

from frontdesk_db.schema import SCHEMAS

from .exceptions import RecordValidationError

_JSON_SCHEMA_CACHE: dict = {}


def bson_to_jsonschema(bson_schema: dict) -> dict:
    """Translate a MongoDB $jsonSchema document into plain JSON Schema.

    Dates arrive over HTTP as ISO strings, so "date" maps to "string" and the
    actual parsing is left to the pydantic model.
    """
    props = {}
    for key, prop in bson_schema.get("properties", {}).items():
        bsonType = prop.get("bsonType")
        types = bsonType if isinstance(bsonType, list) else [bsonType]
        json_types = []
        for t in types:
            if t == "int":
                json_types.append("integer")
            elif t == "bool":
                json_types.append("boolean")
            elif t == "null":
                json_types.append("null")
            else:
                # string, date and anything unknown travel as strings
                json_types.append("string")
        prop_schema: dict = {"type": json_types[0] if len(json_types) == 1 else json_types}
        for keyword in ("minLength", "minimum", "maximum"):
            if keyword in prop:
                prop_schema[keyword] = prop[keyword]
        props[key] = prop_schema

    json_schema = {"type": "object", "properties": props}
    if "required" in bson_schema:
        json_schema["required"] = bson_schema["required"]
    return json_schema


def _json_schema_for(collection: str) -> dict:
    if collection not in _JSON_SCHEMA_CACHE:
        _JSON_SCHEMA_CACHE[collection] = bson_to_jsonschema(SCHEMAS[collection])
    return _JSON_SCHEMA_CACHE[collection]


def _format_pydantic_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def validate_document(collection: str, doc, model: type[BaseModel]) -> dict:
    """Check a JSON document against the collection schema and the model.

    Returns the storable form (dates parsed, unknown keys dropped). Raises
    RecordValidationError on the first problem found.
    """
    try:
        jsonschema.validate(instance=doc, schema=_json_schema_for(collection))
    except jsonschema.ValidationError as e:
        raise RecordValidationError(f"Schema validation error: {e.message}") from e

    try:
        parsed = model.model_validate(doc)
    except ValidationError as e:
        raise RecordValidationError(_format_pydantic_error(e)) from e
    return parsed.model_dump()
