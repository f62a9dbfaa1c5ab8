"""
Turns pydantic validation errors into the API's per-field error mapping
"""
from typing import Any, Dict, List, Type, TypeVar
from pydantic import BaseModel, ValidationError

from marketplace.core.exceptions import ValidationFailed

# Leading "loc" entries FastAPI adds to say where a value came from
REQUEST_SOURCES = ("body", "path", "query", "header", "cookie")

# Pydantic error type -> human readable template
ERROR_MESSAGES = {
    "missing": "The {field} field is required.",
    "string_too_short": "The {field} field is required.",
    "string_type": "The {field} field must be a string.",
    "string_too_long": "The {field} field must not be greater than {max_length} characters.",
    "decimal_parsing": "The {field} field must be a number.",
    "decimal_type": "The {field} field must be a number.",
    "finite_number": "The {field} field must be a number.",
    "greater_than_equal": "The {field} field must be at least {ge}.",
    "less_than_equal": "The {field} field must not be greater than {le}.",
}


def describe_error(field: str, error: Dict[str, Any]) -> str:
    """Turn one pydantic error into a client-facing sentence"""
    error_type = error.get("type", "")
    if error_type == "value_error":
        reason = str((error.get("ctx") or {}).get("error", ""))
        if reason == "required":
            return ERROR_MESSAGES["missing"].format(field=field)
        return reason or error.get("msg") or f"The {field} field is invalid."
    if error_type == "string_too_short" and (error.get("ctx") or {}).get("min_length", 1) > 1:
        return f"The {field} field must be at least {error['ctx']['min_length']} characters."

    template = ERROR_MESSAGES.get(error_type)
    if template is None:
        return error.get("msg") or f"The {field} field is invalid."

    context = {key: str(value) for key, value in (error.get("ctx") or {}).items()}
    return template.format(field=field, **context)


def collect_errors(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    """
    Group pydantic errors by top-level field.

    Every violation is kept, in the order pydantic reported it.
    """
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        location = [str(part) for part in error.get("loc", ())]
        if location and location[0] in REQUEST_SOURCES:
            location = location[1:]
        field = location[0] if location else "body"
        message = describe_error(field, error)
        messages = grouped.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return grouped


SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_payload(schema: Type[SchemaT], payload: Any) -> SchemaT:
    """
    Validate a decoded JSON payload against a request schema.

    Raises:
        ValidationFailed: with every offending field and its messages
    """
    if not isinstance(payload, dict):
        raise ValidationFailed({"body": ["The request body must be a JSON object."]})
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailed(collect_errors(exc.errors())) from exc
