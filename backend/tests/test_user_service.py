"""
HelloUsers Backend — User Service Unit Tests
=============================================

What:  UserService payloads, without HTTP.
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from hellousers.schemas.user import Info, Person, UserId
from hellousers.services.user_service import UserService


class TestUserServicePayloads:
    """Literal and templated values produced by UserService."""

    def setup_method(self):
        self.service = UserService()

    def test_greeting(self):
        assert self.service.greeting() == "Hello World!"

    def test_get_person_literal_values(self):
        """The listing record is fixed; age stays text."""
        person = self.service.get_person()
        assert person == Person(name="Good!", age="21")
        assert isinstance(person.age, str)

    def test_get_person_returns_new_instance_each_call(self):
        first = self.service.get_person()
        second = self.service.get_person()
        assert first == second
        assert first is not second

    def test_get_person_is_immutable(self):
        person = self.service.get_person()
        with pytest.raises(ValidationError):
            person.name = "Changed"

    def test_person_serialization_key_order(self):
        """Serialized keys must come out as name, then age."""
        assert list(self.service.get_person().model_dump()) == ["name", "age"]

    @pytest.mark.parametrize("user_id", [0, 1, 42, 4294967295])
    def test_describe_user(self, user_id):
        assert self.service.describe_user(user_id) == f"User ID is {user_id}"

    def test_acknowledge(self):
        assert self.service.acknowledge(Info(name="Ann")) == "Received name: Ann"

    def test_acknowledge_empty_name(self):
        """An empty string is still a valid name."""
        assert self.service.acknowledge(Info(name="")) == "Received name: "


class TestInfoSchema:
    """Decoding rules for the submission body."""

    def test_extra_fields_ignored(self):
        info = Info.model_validate({"name": "Ann", "age": 30})
        assert info.name == "Ann"

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            Info.model_validate({})

    def test_non_string_name_rejected(self):
        with pytest.raises(ValidationError):
            Info.model_validate({"name": 123})


class TestUserIdDecoding:
    """Path segment → int rules for user IDs."""

    adapter = TypeAdapter(UserId)

    @pytest.mark.parametrize("raw, expected", [("0", 0), ("42", 42), ("+5", 5), ("007", 7)])
    def test_plain_digits_accepted(self, raw, expected):
        assert self.adapter.validate_python(raw) == expected

    @pytest.mark.parametrize("raw", ["1.0", "1_000", " 5", "5 ", "5\n", "-1", "", "+"])
    def test_lax_int_forms_rejected(self, raw):
        with pytest.raises(ValidationError, match="unsigned integer"):
            self.adapter.validate_python(raw)
