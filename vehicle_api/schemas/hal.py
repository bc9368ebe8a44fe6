"""HAL (Hypertext Application Language) representations for the repository REST exposure."""

from pydantic import BaseModel, Field


class HalLink(BaseModel):
    href: str


class HalPage(BaseModel):
    """Paging metadata; number is zero-based."""

    size: int
    totalElements: int
    totalPages: int
    number: int


class HalVehicle(BaseModel):
    name: str | None
    links: dict[str, HalLink] = Field(alias="_links")

    class Config:
        populate_by_name = True


class HalVehicleCollection(BaseModel):
    embedded: dict[str, list[HalVehicle]] = Field(alias="_embedded")
    links: dict[str, HalLink] = Field(alias="_links")
    page: HalPage

    class Config:
        populate_by_name = True
