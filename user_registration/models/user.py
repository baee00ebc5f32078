"""
Registered user record and its JSON schema.

Records are stored with the camelCase keys the form submits
(``firstName``, ``postalCode``...), so the marshmallow schema maps them onto
snake_case attributes.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from marshmallow import EXCLUDE, Schema, fields, post_dump, post_load, validate


@dataclass
class UserRecord:
    """A user accepted by the registration form."""
    first_name: str
    last_name: str
    email: str
    age: int
    postal_code: str
    city: str
    timestamp: str
    id: Optional[Union[int, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the stored camelCase keys."""
        return UserRecordSchema().dump(self)


class UserRecordSchema(Schema):
    """Schema for one entry of the persisted user collection."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Raw(allow_none=True, load_default=None)
    first_name = fields.String(required=True, data_key="firstName")
    last_name = fields.String(required=True, data_key="lastName")
    email = fields.String(required=True)
    age = fields.Integer(required=True, strict=True, validate=validate.Range(min=0))
    postal_code = fields.String(
        required=True,
        data_key="postalCode",
        validate=validate.Regexp(r"^[0-9]{5}\Z"),
    )
    city = fields.String(required=True)
    timestamp = fields.String(required=True)

    @post_load
    def make_record(self, data: Dict[str, Any], **kwargs) -> UserRecord:
        return UserRecord(**data)

    @post_dump
    def drop_missing_id(self, data: Dict[str, Any], **kwargs) -> Dict[str, Any]:
        # Locally stored records have no id until the remote API assigns one
        if data.get('id') is None:
            data.pop('id', None)
        return data
