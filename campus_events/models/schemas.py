"""Request schemas.

Create schemas carry the full field set; update schemas are patches whose
fields are applied only when the client sent them. JSON keys are camelCase,
snake_case is accepted as well. A patch may omit a required column but may
not set it to null.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictBool, field_validator
from pydantic.alias_generators import to_camel


def _reject_null(value):
    if value is None:
        raise ValueError("may be omitted but not null")
    return value


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def changes(self) -> dict:
        """Fields explicitly set by the caller, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class CollegeCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)


class CollegeUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)

    @field_validator('name', mode='before')
    @classmethod
    def not_null(cls, value):
        return _reject_null(value)


class EventCreate(CamelModel):
    college_id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=255)
    type: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    date: datetime
    max_capacity: int = Field(ge=0)
    created_by: str = Field(min_length=1, max_length=255)


class EventUpdate(CamelModel):
    college_id: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    type: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    date: Optional[datetime] = None
    max_capacity: Optional[int] = Field(default=None, ge=0)
    created_by: Optional[str] = Field(default=None, min_length=1, max_length=255)

    # description is the only nullable column
    @field_validator('college_id', 'name', 'type', 'date', 'max_capacity', 'created_by', mode='before')
    @classmethod
    def not_null(cls, value):
        return _reject_null(value)


class StudentCreate(CamelModel):
    college_id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr


class StudentUpdate(CamelModel):
    college_id: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None

    @field_validator('college_id', 'name', 'email', mode='before')
    @classmethod
    def not_null(cls, value):
        return _reject_null(value)


class RegistrationCreate(CamelModel):
    event_id: str = Field(min_length=1)
    student_id: str = Field(min_length=1)


class AttendanceCreate(CamelModel):
    registration_id: str = Field(min_length=1)
    attended: StrictBool


class AttendanceUpdate(CamelModel):
    attended: StrictBool


class FeedbackCreate(CamelModel):
    registration_id: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = Field(default=None, max_length=2000)
