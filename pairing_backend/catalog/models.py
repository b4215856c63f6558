from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NON_ALCOHOLIC_ABV = "0%"


class DrinkRecord(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    flavour_notes: str = Field(..., min_length=1)
    region: str = Field(..., min_length=1)
    abv: str = Field(..., min_length=1)
    recommended_foods: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    image_url: str | None = None
    affiliate_link: str | None = None

    @property
    def is_alcoholic(self) -> bool:
        return self.abv.strip() != NON_ALCOHOLIC_ABV


class PublicDrink(BaseModel):
    """Drink fields shown alongside a pairing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    type: str
    flavour_notes: str
    region: str
    abv: str
    affiliate_link: str | None = None
    description: str
    image_url: str | None = None

    @classmethod
    def from_record(cls, drink: DrinkRecord) -> PublicDrink:
        return cls(
            id=drink.id,
            name=drink.name,
            type=drink.type,
            flavour_notes=drink.flavour_notes,
            region=drink.region,
            abv=drink.abv,
            affiliate_link=drink.affiliate_link,
            description=drink.description,
            image_url=drink.image_url,
        )
