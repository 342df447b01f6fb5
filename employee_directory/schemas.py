import re
from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError
from employee_directory.errors import ValidationError

NIRC_RE = re.compile(r"^\w{3,20}$")
EMAIL_RE = re.compile(r"^\S+@\S+\.\S+$")
INTEGER_RE = re.compile(r"^-?\d+$")
# ids are stored as signed 64-bit integers
ID_MIN, ID_MAX = -(2 ** 63), 2 ** 63 - 1

NIRC_MESSAGE = "Invalid NIRC (3-20 alphanumeric characters)"
FULL_NAME_MESSAGE = "Full name is required"
EMAIL_MESSAGE = "Invalid email address"
FIELD_MESSAGES = {
    "nirc": NIRC_MESSAGE,
    "full_name": FULL_NAME_MESSAGE,
    "position": "Invalid position",
    "email": EMAIL_MESSAGE,
}

class EmployeeIn(BaseModel):
    """Body of POST /api/employees. Every text field arrives trimmed."""
    model_config = ConfigDict(populate_by_name=True, validate_default=True)

    nirc: str = ""
    full_name: str = Field("", alias="fullName")
    position: str = ""
    email: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def as_trimmed_text(cls, v, info: ValidationInfo):
        if v is None:
            return ""
        if isinstance(v, bool) or not isinstance(v, (str, int, float)):
            raise PydanticCustomError(f"{info.field_name}_type", FIELD_MESSAGES[info.field_name])
        return str(v).strip()

    @field_validator("nirc")
    @classmethod
    def nirc_format(cls, v):
        if not NIRC_RE.match(v):
            raise PydanticCustomError("nirc_format", NIRC_MESSAGE)
        return v

    @field_validator("full_name")
    @classmethod
    def full_name_required(cls, v):
        if not v:
            raise PydanticCustomError("full_name_required", FULL_NAME_MESSAGE)
        return v

    @field_validator("email")
    @classmethod
    def email_format(cls, v):
        if v and not EMAIL_RE.match(v):
            raise PydanticCustomError("email_format", EMAIL_MESSAGE)
        return v


class EmployeeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nirc: str
    full_name: str
    position: str = ""
    email: str = ""
    created_at: datetime

    @field_validator("position", "email", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v


def _is_integer_id(item: Any) -> bool:
    if isinstance(item, bool):
        return False
    if isinstance(item, str) and INTEGER_RE.match(item.strip()):
        item = int(item)
    return isinstance(item, int) and ID_MIN <= item <= ID_MAX


class EmployeeDeleteIn(BaseModel):
    """Body of DELETE /api/employees."""
    ids: list[int] = Field(default_factory=list, validate_default=True)

    @field_validator("ids", mode="before")
    @classmethod
    def integer_ids(cls, v):
        if not isinstance(v, list) or not v:
            raise PydanticCustomError("ids_required", "ids must be a non-empty array of employee IDs")
        if not all(_is_integer_id(item) for item in v):
            raise PydanticCustomError("ids_integer", "ids must contain only integer employee IDs")
        return [int(item) for item in v]


class DeleteResult(BaseModel):
    success: bool
    deleted_count: int = Field(0, serialization_alias="deletedCount")
    errors: list[str] | None = None
    missing_ids: list[int] | None = Field(None, serialization_alias="missingIds")

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# -------- payload parsing --------
def _parse(model: type[BaseModel], payload: Any):
    if not isinstance(payload, dict):
        raise ValidationError(["Request body must be a JSON object"])
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError([err["msg"] for err in exc.errors()]) from exc

def parse_employee_create(payload: Any) -> EmployeeIn:
    """Validate a create payload, reporting one message per violated rule."""
    return _parse(EmployeeIn, payload)

def parse_employee_delete(payload: Any) -> EmployeeDeleteIn:
    return _parse(EmployeeDeleteIn, payload)
