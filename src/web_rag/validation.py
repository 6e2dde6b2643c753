"""Input validation for the two public operations.

Validators never raise. They return a :class:`Validated` that holds
either the accepted value or the :class:`ValidationError` describing
why it was rejected, so both pipelines handle bad input the same way.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import AnyHttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from web_rag.errors import ValidationError

T = TypeVar("T")

_URL_ADAPTER = TypeAdapter(AnyHttpUrl)


@dataclass(frozen=True)
class Validated(Generic[T]):
    """Tagged result of a validation: a value or an error, never both."""

    value: T | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error if validation failed."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def validate_url(url: object) -> Validated[str]:
    """Accept an absolute ``http``/``https`` URL string.

    Surrounding whitespace is removed; otherwise the string is returned
    as given. Pydantic's normalized form is only used for checking.
    """
    if not isinstance(url, str) or not url.strip():
        return Validated(error=ValidationError("URL must be a non-empty string"))
    try:
        _URL_ADAPTER.validate_python(url.strip())
    except PydanticValidationError:
        return Validated(error=ValidationError(f"Invalid URL: {url!r}"))
    return Validated(value=url.strip())


def validate_question(question: object) -> Validated[str]:
    """Accept any string containing non-whitespace characters."""
    if not isinstance(question, str):
        return Validated(error=ValidationError("Question must be a string"))
    if not question.strip():
        return Validated(error=ValidationError("Question must not be empty"))
    return Validated(value=question)
