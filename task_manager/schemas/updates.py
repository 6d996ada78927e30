from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError as SchemaValidationError

from ..exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_partial_update(body: dict, allowed: set, schema: Type[SchemaT]) -> SchemaT:
    """Validate a PATCH body against an allow-list, all or nothing.

    Any key outside ``allowed`` rejects the whole request before a single
    field is looked at.
    """
    if not set(body).issubset(allowed):
        raise ValidationError("Invalid update sent!")
    try:
        return schema.model_validate(body)
    except SchemaValidationError as e:
        messages = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ValidationError("; ".join(messages))
