"""
Unit tests for the stored user record and its schema.
"""

import pytest
from marshmallow import ValidationError as SchemaValidationError

from user_registration.models import UserRecord, UserRecordSchema


@pytest.fixture
def record():
    return UserRecord(
        first_name="Marie",
        last_name="Curie",
        email="marie.curie@example.com",
        age=42,
        postal_code="75005",
        city="Paris",
        timestamp="2026-01-15T10:30:00Z",
    )


@pytest.mark.unit
class TestUserRecordSchema:

    def test_dump_uses_camel_case_keys(self, record, stored_user):
        assert UserRecordSchema().dump(record) == stored_user

    def test_dump_keeps_server_id(self, record):
        record.id = 11
        assert record.to_dict()["id"] == 11

    def test_load_builds_record(self, record, stored_user):
        assert UserRecordSchema().load(stored_user) == record

    def test_load_ignores_unknown_keys(self, stored_user):
        loaded = UserRecordSchema().load(dict(stored_user, extra="ignored"))
        assert not hasattr(loaded, "extra")

    def test_load_requires_fields(self, stored_user):
        del stored_user["email"]
        with pytest.raises(SchemaValidationError) as exc_info:
            UserRecordSchema().load(stored_user)
        assert "email" in exc_info.value.messages

    @pytest.mark.parametrize("postal_code", ["1234", "7500A", "75001\n"])
    def test_load_rejects_bad_postal_code(self, stored_user, postal_code):
        stored_user["postalCode"] = postal_code
        with pytest.raises(SchemaValidationError):
            UserRecordSchema().load(stored_user)

    @pytest.mark.parametrize("age", ["42", -1, 4.5])
    def test_load_rejects_bad_age(self, stored_user, age):
        stored_user["age"] = age
        with pytest.raises(SchemaValidationError):
            UserRecordSchema().load(stored_user)


@pytest.mark.unit
class TestUserRecord:

    def test_to_dict_round_trips_through_schema(self, record):
        assert UserRecordSchema().load(record.to_dict()) == record
