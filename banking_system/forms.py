"""
Pydantic schemas for the console forms

Each model describes the fields one screen collects. Raw text entered by
the user goes through parse_form, which turns validation failures into
FormatError so the screen can show the message and ask again.
"""

from decimal import Decimal
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .currency import decimal_from_string, to_decimal
from .exceptions import FormatError

FormT = TypeVar("FormT", bound=BaseModel)


def _amount_from_text(value: Any) -> Any:
    """Parse plain numbers first, then display formats such as $1,000.50"""
    if not isinstance(value, str):
        return value
    try:
        return to_decimal(value)
    except FormatError:
        return decimal_from_string(value)


class LoginForm(BaseModel):
    username: str = ""
    password: str = ""


class AccountForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    account_type: str = Field(..., description="Account type (savings, checking, loan)")
    account_number: str


class LoanForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    loan_type: str = Field(..., description="Loan type (home, car, personal)")
    principal: Decimal
    interest_rate: Decimal = Field(Decimal("0.05"), description="Annual rate as a decimal fraction")
    term_months: int = 360

    @field_validator("principal", mode="before")
    @classmethod
    def principal_from_text(cls, value: Any) -> Any:
        return _amount_from_text(value)


class ConversionForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    amount: Decimal
    currency: str = Field(..., description="Currency code (EUR, GBP, etc.)")

    @field_validator("amount", mode="before")
    @classmethod
    def amount_from_text(cls, value: Any) -> Any:
        return _amount_from_text(value)


def parse_form(model: Type[FormT], data: Dict[str, Any]) -> FormT:
    """
    Validate raw form data

    Blank entries count as missing so that field defaults apply.

    Raises:
        FormatError: If any field is missing or malformed
    """
    cleaned = {k: v for k, v in data.items() if not (isinstance(v, str) and v.strip() == "")}
    try:
        return model.model_validate(cleaned)
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise FormatError("Invalid input", context={"fields": ", ".join(fields)}) from e
