"""
HelloUsers Backend — User Service
==================================

What:  Builds the response payloads for the greeting and users routes.
Who:   Called by route handlers in routes/root.py and routes/users.py.

Design Decision:
    UserService is stateless. Every call constructs its result from
    literals or from the caller's input, so concurrent requests can never
    observe each other's values.
"""

import logging

from hellousers.schemas.user import Info, Person

logger = logging.getLogger(__name__)

GREETING = "Hello World!"

# Fixed listing record. `age` is deliberately text.
DEFAULT_PERSON_NAME = "Good!"
DEFAULT_PERSON_AGE = "21"


class UserService:
    """
    Payload construction for the users API.

    Responsibilities:
        - greeting(): text for GET /
        - get_person(): record for GET /users
        - describe_user(): text for GET /users/{id}
        - acknowledge(): reply for POST /users
    """

    def greeting(self) -> str:
        return GREETING

    def get_person(self) -> Person:
        """Returns a fresh Person on every call; instances are never shared."""
        return Person(name=DEFAULT_PERSON_NAME, age=DEFAULT_PERSON_AGE)

    def describe_user(self, user_id: int) -> str:
        """
        Format the lookup reply for one user ID.

        Args:
            user_id: Already decoded by FastAPI as an unsigned 32-bit integer.
        """
        logger.debug("Describing user %d", user_id)
        return f"User ID is {user_id}"

    def acknowledge(self, info: Info) -> str:
        """
        Echo a decoded submission.

        What:    Returns "Received name: <name>" for the submitted Info.
        Note:    The caller serializes the result as a JSON string, so any
                 escaping happens at the encoding layer, not here.
        """
        return f"Received name: {info.name}"


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
