import os
import json
import jsonschema

from pf2statblock.errors import is_error_record

RECORD_SCHEMA = "statrecord.schema.json"
ERROR_SCHEMA = "error.schema.json"

_validators = {}


def get_schema(schema_name):
    schema_file = os.path.join(
        os.path.dirname(os.path.abspath(__file__)), schema_name)
    with open(schema_file) as fp:
        return json.load(fp)


def get_validator(schema_name):
    if schema_name not in _validators:
        schema = get_schema(schema_name)
        cls = jsonschema.validators.validator_for(schema)
        cls.check_schema(schema)
        _validators[schema_name] = cls(schema)
    return _validators[schema_name]


def validate_against_schema(data, schema_name):
    get_validator(schema_name).validate(data)


def validate_record(struct):
    """Validates a StatRecord, or an error record against its own schema."""
    if is_error_record(struct):
        validate_against_schema(struct, ERROR_SCHEMA)
    else:
        validate_against_schema(struct, RECORD_SCHEMA)
