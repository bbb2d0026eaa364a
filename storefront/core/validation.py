"""
Request validation helpers

Pydantic does the field checking; this module turns its error list into the
flat ``{field, message}`` entries the API returns.
"""

from typing import Annotated, Any, Iterable, Type, TypeVar

from pydantic import AfterValidator, BaseModel, HttpUrl, StringConstraints, TypeAdapter, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Request locations FastAPI prefixes onto error paths
REQUEST_LOCATIONS = ("body", "path", "query", "header", "cookie", "form")

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    """Validate an http(s) URL and return it exactly as sent"""
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("Input should be a valid URL")
    return value


# URL checked by pydantic but persisted as plain text, sized to the image URL columns
HttpUrlStr = Annotated[str, StringConstraints(max_length=1000), AfterValidator(_check_url)]


class RequestValidationFailed(Exception):
    """Raised when raw input does not satisfy a request schema"""

    def __init__(self, details: list[dict[str, str]]):
        super().__init__("Validation failed")
        self.message = "Validation failed"
        self.details = details


def _field_label(field: str) -> str:
    name = field.rsplit(".", 1)[-1].replace("_", " ")
    return name[:1].upper() + name[1:]


def format_validation_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """Convert pydantic/FastAPI errors to ``{field, message}`` entries with dotted paths"""
    details = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]

        error_type = error.get("type", "")
        if error_type == "json_invalid":
            details.append({"field": "body", "message": "Invalid JSON body"})
            continue

        field = ".".join(str(part) for part in loc) or "body"

        if error_type == "missing":
            message = f"{_field_label(field)} is required"
        else:
            message = error.get("msg", "Invalid value")
            if message.startswith("Value error, "):
                message = message[len("Value error, "):]

        details.append({"field": field, "message": message})

    return details


def validate_request(schema: Type[ModelT], data: Any) -> ModelT:
    """Parse raw input with ``schema`` or raise RequestValidationFailed"""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise RequestValidationFailed(format_validation_errors(e.errors())) from e
