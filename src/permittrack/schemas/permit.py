import re
import uuid
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

NAME_PATTERN = re.compile(r"^[a-zA-Z0-9 \-.']+$")


class PermitStatus(str, Enum):
    SUBMITTED = "SUBMITTED"
    REVIEW = "REVIEW"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


def _check_name(value: Any, label: str, max_length: int) -> str:
    """Apply the not-blank, length and character rules, with messages the frontend shows as-is."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("not_blank", "{label} is required", {"label": label})
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", "{label} must be a string", {"label": label})
    if len(value) > max_length:
        raise PydanticCustomError(
            "string_too_long",
            "{label} must be at most {max_length} characters",
            {"label": label, "max_length": max_length},
        )
    if not NAME_PATTERN.match(value):
        raise PydanticCustomError(
            "string_pattern_mismatch",
            "{label}: only letters, numbers, spaces, dashes, apostrophes allowed",
            {"label": label},
        )
    return value


class PermitRequest(BaseModel):
    # Defaults let a missing field reach the validators and report "<field> is required"
    permit_name: str = Field(default=None, validate_default=True)
    applicant_name: str = Field(default=None, validate_default=True)
    permit_type: str = Field(default=None, validate_default=True)
    status: PermitStatus = PermitStatus.SUBMITTED

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("permit_name", mode="before")
    @classmethod
    def _validate_permit_name(cls, value: Any) -> str:
        return _check_name(value, "Permit name", 100)

    @field_validator("applicant_name", mode="before")
    @classmethod
    def _validate_applicant_name(cls, value: Any) -> str:
        return _check_name(value, "Applicant name", 100)

    @field_validator("permit_type", mode="before")
    @classmethod
    def _validate_permit_type(cls, value: Any) -> str:
        return _check_name(value, "Permit type", 50)

    @field_validator("status", mode="before")
    @classmethod
    def _validate_status(cls, value: Any) -> PermitStatus:
        if value is None:
            return PermitStatus.SUBMITTED
        try:
            return PermitStatus(value)
        except ValueError:
            raise PydanticCustomError(
                "enum",
                "Status must be one of: SUBMITTED, REVIEW, APPROVED, REJECTED",
            ) from None


class PermitResponse(BaseModel):
    id: uuid.UUID
    permit_name: str
    applicant_name: str
    permit_type: str
    status: PermitStatus
    submitted_date: datetime

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
