# models/student_schema.py
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

from utils.errors import ValidationError

STUDENT_FIELDS = ("firstname", "lastname", "age", "department", "emailId")

# BSON stores integers as int64 at most
Int64 = Annotated[StrictInt, Field(ge=-(2**63), le=2**63 - 1)]


class Student(BaseModel):
    # unknown keys are dropped, never stored
    model_config = ConfigDict(extra="ignore")

    firstname: StrictStr
    lastname: StrictStr
    age: Int64
    department: StrictStr
    emailId: StrictStr


def _describe(exc):
    parts = []
    for err in exc.errors():
        field = ".".join(str(x) for x in err["loc"]) or "body"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


def parse_student(payload):
    """Turn a decoded JSON body into a Student or raise ValidationError."""
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return Student.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(_describe(e)) from e
