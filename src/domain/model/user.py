from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class User:
    """Domain model representing a CampusCoffee user.

    Validation happens in the API layer on the DTO, so the domain model only
    carries the data. ``id`` and the timestamps are None until the user
    has been persisted.
    """
    login_name: str
    email_address: str
    first_name: str
    last_name: str
    id: int | None = None
    created_at: datetime | None = None  # set on creation
    updated_at: datetime | None = None  # set on creation and update
