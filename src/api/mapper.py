"""Conversion between the User domain model and the UserDto transfer object.

Keeps the domain layer independent of the wire format. Both directions are
plain field copies without validation.
"""

from api.models import UserDto
from domain.model.user import User


def from_domain(source: User) -> UserDto:
    return UserDto.model_construct(
        id=source.id,
        created_at=source.created_at,
        updated_at=source.updated_at,
        login_name=source.login_name,
        email_address=source.email_address,
        first_name=source.first_name,
        last_name=source.last_name,
    )


def to_domain(source: UserDto) -> User:
    return User(
        id=source.id,
        created_at=source.created_at,
        updated_at=source.updated_at,
        login_name=source.login_name,
        email_address=str(source.email_address),
        first_name=source.first_name,
        last_name=source.last_name,
    )
