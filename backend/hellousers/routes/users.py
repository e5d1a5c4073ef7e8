"""
HelloUsers Backend — Users Route Handlers
==========================================

What:  GET /users, GET /users/{id} and POST /users.
How:   FastAPI decodes the path parameter and JSON body; handlers only
       delegate to UserService and choose the media type.

Decoding failures:
    An {id} that is not plain digits (optionally "+"-prefixed) or is out of
    the unsigned 32-bit range, or a POST body that is
    not JSON / lacks a string "name", is rejected by FastAPI's request
    validation with 422 before any handler here runs.
"""

from typing import Annotated

from fastapi import APIRouter, Path
from fastapi.responses import PlainTextResponse

from hellousers.schemas.user import Info, Person, UserId
from hellousers.services.user_service import user_service

# Largest value of an unsigned 32-bit integer
MAX_USER_ID = 2**32 - 1

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=Person,
    summary="Fixed user record",
    description='Always returns {"name": "Good!", "age": "21"}.',
)
async def get_json_data() -> Person:
    return user_service.get_person()


@router.get(
    "/{user_id}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "User lookup text"},
        422: {"description": "id is not an unsigned 32-bit integer"},
    },
    summary="Look up a user by numeric ID",
)
async def get_user(
    user_id: Annotated[
        UserId,
        Path(
            ge=0,
            le=MAX_USER_ID,
            description="Unsigned 32-bit user ID",
        ),
    ],
) -> str:
    """Return "User ID is {user_id}"."""
    return user_service.describe_user(user_id)


@router.post(
    "",
    response_model=str,
    responses={
        200: {"description": "Echoed name as a JSON string"},
        422: {"description": "Body is not JSON or has no string 'name'"},
    },
    summary="Submit a name",
)
async def post_json(info: Info) -> str:
    """The reply is serialized as a JSON string, e.g. "Received name: Ann"."""
    return user_service.acknowledge(info)
