from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

RequiredStr = Annotated[StrictStr, Field(min_length=1)]
EmailAddress = Annotated[StrictStr, Field(min_length=1, pattern=EMAIL_PATTERN)]
Number = StrictInt | Annotated[StrictFloat, Field(allow_inf_nan=False)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateRequest(CamelModel):
    invalid_input_message: ClassVar[str] = "Invalid input: Ensure the request body is provided and is of the correct type."


class RecordOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str


class ErrorResponse(BaseModel):
    error: str
