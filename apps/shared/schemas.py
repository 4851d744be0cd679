"""
Validation types shared by the content schemas.
"""
from typing import Annotated, Any

from pydantic import AfterValidator, HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_http_url_adapter = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    # Validate only; the caller's spelling is what gets stored
    try:
        _http_url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("must be a valid http or https URL") from None
    return value


HttpUrlStr = Annotated[str, AfterValidator(_check_http_url)]


def reject_null(value: Any) -> Any:
    """
    Field validator body for update schemas.

    Required columns may be left out of a partial update but never cleared,
    so an explicit null is a validation error rather than "leave unchanged".
    """
    if value is None:
        raise ValueError("may be omitted but not null")
    return value
