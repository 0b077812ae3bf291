from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator

from serial_validator.core.errors import ErrorCode


class ValidationRequest(BaseModel):
    """Inbound event: {"serialNumber": "<string>"}"""
    model_config = ConfigDict(populate_by_name=True)

    serial_number: StrictStr = Field(alias="serialNumber")


class ValidationResult(BaseModel):
    """Outbound result: {"isValid": bool, "errors": [...]}"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    is_valid: bool = Field(alias="isValid")
    errors: tuple[ErrorCode, ...] = ()

    @model_validator(mode="after")
    def check_valid_iff_no_errors(self):
        if self.is_valid != (len(self.errors) == 0):
            raise ValueError("isValid must be true exactly when errors is empty")
        return self

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
