"""User aggregate — the people who place orders."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from oms.domain import oms


@oms.aggregate
class User:
    """A registered customer. Created once and never modified afterwards."""

    name = String(required=True, max_length=255)
    email = String(required=True, max_length=254, unique=True)
    created_at = DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        email = self.email or ""
        local_part, _, domain_part = email.partition("@")
        if (
            not local_part
            or not domain_part
            or "@" in domain_part
            or " " in email
            or "." not in domain_part
            or domain_part.startswith(".")
            or domain_part.endswith(".")
        ):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @classmethod
    def register(cls, name, email):
        return cls(name=name, email=email.strip().lower(), created_at=datetime.now(UTC))
