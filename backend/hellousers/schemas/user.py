"""
HelloUsers Backend — Pydantic Request/Response Schemas
=======================================================

What:  The two request-scoped record shapes of the users API.
How:   FastAPI decodes POST /users bodies into `Info` (rejecting malformed
       input with 422 before the handler runs) and serializes `Person`
       for GET /users.

Neither model is persisted; both live for the duration of one request.
"""

import re
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# Optional plus sign, then ASCII digits only. No whitespace, underscores or fractions.
_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")


def _require_unsigned_digits(value: Any) -> Any:
    """
    Reject text that pydantic's lax int parsing would otherwise accept.

    "1.0", "1_000" and " 5" all coerce to int in lax mode; a user ID
    segment must be plain digits.
    """
    if isinstance(value, str) and not _UNSIGNED_INT_RE.fullmatch(value):
        raise ValueError("must be an unsigned integer")
    return value


# Path segments decoded as user IDs. Range limits are applied by the route.
UserId = Annotated[int, BeforeValidator(_require_unsigned_digits)]


class Info(BaseModel):
    """
    What:  Body of POST /users.
    Who:   Decoded by FastAPI from the JSON request body.

    Unknown extra keys are ignored; a missing or non-string `name` is a
    validation error.
    """
    name: str = Field(description="Name to echo back")


class Person(BaseModel):
    """
    What:  Fixed record returned by GET /users.

    `age` is text, not a number. Field order is significant: it fixes the
    serialized key order to name, age.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display name")
    age: str = Field(description="Age, as text")
