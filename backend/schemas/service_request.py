from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints, computed_field, field_validator
from pydantic.alias_generators import to_camel

from models.service_request import ServiceRequestStatus

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
StrippedStr = Annotated[str, StringConstraints(strip_whitespace=True)]

# JSON bodies use camelCase keys (serviceName, scheduledDateTime, ...)
camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Input schema for creating a service request; owner and timestamps come from the server
class ServiceRequestCreate(BaseModel):
    model_config = camel_config

    service_name: NonEmptyStr
    customer_name: NonEmptyStr
    phone: NonEmptyStr
    email: NonEmptyStr
    company_name: NonEmptyStr
    assigned_to: NonEmptyStr
    scheduled_date_time: datetime
    status: ServiceRequestStatus = ServiceRequestStatus.PENDING

    comments: Optional[StrippedStr] = None
    signature: Optional[str] = None
    audio_feedback: Optional[str] = None
    video_feedback: Optional[str] = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("scheduled_date_time")
    @classmethod
    def to_utc(cls, value: datetime) -> datetime:
        # Stored without an offset, so normalize to UTC first; naive input is read as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


# Partial update; only these keys are ever applied, anything else in the body is dropped
class ServiceRequestUpdate(BaseModel):
    model_config = camel_config

    comments: Optional[StrippedStr] = None
    status: Optional[ServiceRequestStatus] = None
    signature: Optional[str] = None
    audio_feedback: Optional[str] = None
    video_feedback: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def status_not_null(cls, value):
        if value is None:
            raise ValueError("status cannot be null")
        return value

    def changes(self) -> dict:
        """Attribute/value pairs for the keys the client actually sent."""
        return {name: getattr(self, name) for name in self.model_fields_set}


# Output schema for a stored service request
class ServiceRequestResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    service_name: str
    customer_name: str
    phone: str
    email: str
    company_name: str
    assigned_to: str
    scheduled_date_time: datetime
    status: ServiceRequestStatus
    comments: Optional[str] = None
    signature: Optional[str] = None
    audio_feedback: Optional[str] = None
    video_feedback: Optional[str] = None
    owner_id: str
    created_at: datetime
    updated_at: datetime

    @field_validator("scheduled_date_time", "created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite drops tzinfo; every stored datetime is UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    # The mobile client addresses records by "_id"
    @computed_field(alias="_id")
    @property
    def legacy_id(self) -> str:
        return self.id
