# qr_api/schemas/common.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Same shape as uuid4().__str__(), any case.
ID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"


class AppBaseModel(BaseModel):
    """Base for every API model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        from_attributes=True,
    )


def reject_null(v):
    """Before-validator: the field may be omitted but not sent as null."""
    if v is None:
        raise ValueError("may be omitted but must not be null")
    return v
