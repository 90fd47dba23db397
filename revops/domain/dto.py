"""Wire-level request and response contracts."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter


def _dto_reject_non_numeric_price(value: Any) -> Any:
    if isinstance(value, (bool, str)):
        raise ValueError("price must be a number")
    return value


ActivityPrice = Annotated[int, BeforeValidator(_dto_reject_non_numeric_price), Field(ge=0)]
"""Non-negative integer price; integral floats such as `5.0` are accepted as `5`."""

ACTIVITY_PRICE_ADAPTER: TypeAdapter[int] = TypeAdapter(ActivityPrice)


class ActivityResponse(BaseModel):
    """Client-facing activity representation.

    Identifiers, timestamps and audit fields are server-managed and never
    travel on the wire.

    Attributes:
        activity: Activity display name.
        category: Free-form category label.
        price: Non-negative price.
        image_location: Optional image path or URI, `imageLocation` on the wire.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    activity: str = Field(min_length=1)
    category: str = Field(min_length=1)
    price: ActivityPrice
    image_location: str | None = Field(default=None, alias="imageLocation")
