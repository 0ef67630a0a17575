# rolodex/services/validation.py
from __future__ import annotations

from typing import List, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from rolodex.domain.errors import ValidationError

M = TypeVar("M", bound=BaseModel)


def error_messages(exc: PydanticValidationError) -> List[str]:
    """
    Human-readable messages, one per violation, in field order.
    Our own `raise ValueError("...")` messages come back without pydantic's prefix.
    """
    out: List[str] = []
    for err in exc.errors():
        # built-in parse errors carry ctx.error too; only validator messages are bare
        ctx_error = (err.get("ctx") or {}).get("error")
        if err["type"] == "value_error" and ctx_error is not None:
            out.append(str(ctx_error))
            continue
        loc = ".".join(str(x) for x in err.get("loc", ()))
        out.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return out


def parse_model(model: type[M], data: dict) -> M:
    """Build `model` from raw data, raising the domain ValidationError on failure."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        messages = error_messages(e)
        raise ValidationError(messages[0], messages) from e


def validate_model(obj: M) -> M:
    """
    Re-run the field rules of an already-built request. Requests made with
    `model_construct()` (or mutated after construction) are checked here.
    """
    return parse_model(type(obj), dict(obj))
