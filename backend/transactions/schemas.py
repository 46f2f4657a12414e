# backend/transactions/schemas.py

from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

# |amount| must fit comfortably in BIGINT cents
MAX_ABS_AMOUNT = Decimal("10000000000")


def _check_amount(value: Optional[Decimal]) -> Optional[Decimal]:
    if value is None:
        return value
    if not value.is_finite():
        raise ValueError("amount must be a finite number")
    if abs(value) >= MAX_ABS_AMOUNT:
        raise ValueError("amount is out of range")
    return value


Amount = Annotated[Decimal, AfterValidator(_check_amount)]


def _clean_tags(tags: Optional[List[str]]) -> Optional[List[str]]:
    """Strip, drop blanks and de-duplicate while keeping first-seen order."""
    if tags is None:
        return None
    seen = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


class TransactionCreateSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    amount: Amount
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return [] if v is None else v

    @field_validator("tags")
    @classmethod
    def _tags(cls, v):
        cleaned = _clean_tags(v)
        if any(len(t) > 50 for t in cleaned):
            raise ValueError("tags must be at most 50 characters")
        return cleaned


class TransactionUpdateSchema(BaseModel):
    """
    Partial update: a field that is absent (or null) keeps its old value.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    amount: Optional[Amount] = None
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    tags: Optional[List[str]] = None

    @field_validator("tags")
    @classmethod
    def _tags(cls, v):
        cleaned = _clean_tags(v)
        if cleaned and any(len(t) > 50 for t in cleaned):
            raise ValueError("tags must be at most 50 characters")
        return cleaned

    def changes(self) -> dict:
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}
