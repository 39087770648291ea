"""Validation helpers that turn pydantic errors into Results"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Annotated, Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, Field, TypeAdapter, create_model
from pydantic import ValidationError as PydanticValidationError

from seatkit.core.result import Result, err, ok

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

GENERAL_FIELD = "_general"
VALIDATION_ERROR_CODE = "VALIDATION_ERROR"


@dataclass
class ValidationError:
    """Validation failure with messages grouped by dotted field path"""
    message: str = "Validation failed"
    fields: Dict[str, List[str]] = field(default_factory=dict)
    code: str = VALIDATION_ERROR_CODE

    @property
    def details(self) -> List[str]:
        """Flatten into "path: message" lines"""
        return [
            f"{path}: {message}"
            for path, messages in self.fields.items()
            for message in messages
        ]


def _issue_path(issue: Dict[str, Any]) -> str:
    path = ".".join(str(part) for part in issue.get("loc", ()))
    if path:
        return path
    # Model-level checks may name the field they guard
    ctx = issue.get("ctx") or {}
    return ctx.get("field") or GENERAL_FIELD


def from_pydantic_error(error: PydanticValidationError) -> ValidationError:
    """Convert a pydantic ValidationError into a ValidationError"""
    fields: Dict[str, List[str]] = {}
    for issue in error.errors(include_url=False):
        fields.setdefault(_issue_path(issue), []).append(issue["msg"])
    return ValidationError(fields=fields)


def validate(schema: Any, data: Any) -> Result[Any, ValidationError]:
    """
    Validate data against a model class, a TypeAdapter or any type pydantic
    understands. Every violation is collected, not just the first.
    """
    try:
        if isinstance(schema, type) and issubclass(schema, BaseModel):
            return ok(schema.model_validate(data))
        adapter = schema if isinstance(schema, TypeAdapter) else TypeAdapter(schema)
        return ok(adapter.validate_python(data))
    except PydanticValidationError as exc:
        return err(from_pydantic_error(exc))


@lru_cache(maxsize=None)
def partial_model(model: Type[M]) -> Type[BaseModel]:
    """
    Build a copy of a model where every field may be omitted.

    Field constraints are kept, so present values are still checked, and
    omitted fields are left unset. Model-level validators are not carried over.
    """
    fields: Dict[str, Any] = {}
    for name, info in model.model_fields.items():
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        fields[name] = (annotation, Field(default=None, alias=info.alias))

    return create_model(
        f"Partial{model.__name__}",
        __config__=model.model_config,
        **fields,
    )


def validate_partial(schema: Type[M], data: Any) -> Result[BaseModel, ValidationError]:
    """Validate only the fields that are present, for partial updates"""
    return validate(partial_model(schema), data)


def is_validation_error(value: Any) -> bool:
    return isinstance(value, ValidationError) and value.code == VALIDATION_ERROR_CODE
