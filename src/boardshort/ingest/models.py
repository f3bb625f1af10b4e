"""Data models for the content ingestion layer."""
from __future__ import annotations

from datetime import date as Date
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, TypeAdapter

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def _calendar_date(value: str) -> str:
    # The pattern alone lets through days such as 2025-02-30.
    Date.fromisoformat(value)
    return value


IsoDate = Annotated[str, Field(pattern=DATE_PATTERN), AfterValidator(_calendar_date)]

Tag = Literal["sunrise", "sunset"]
MediaType = Literal["image", "video"]


class ImageRecord(BaseModel):
    """One photographed or filmed moment."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    src: str = Field(..., min_length=1)
    type: MediaType = "image"
    time: Optional[str] = Field(default=None, description="Local capture time, HH:MM 24-hour")
    caption: Optional[str] = None
    tag: Optional[Tag] = None
    weather: Optional[str] = None
    location: Optional[str] = None
    hero: Optional[bool] = None


class DayRecord(BaseModel):
    """All images shot on one calendar date."""

    model_config = ConfigDict(extra="allow")

    date: IsoDate
    location: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    is_hero: Optional[bool] = None
    hero_index: Optional[int] = None
    images: List[ImageRecord] = Field(default_factory=list)
    label: Optional[str] = Field(default=None, exclude=True)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class SidecarUnit(ImageRecord):
    """A content file describing exactly one image, stored next to the media."""

    shape: Literal["sidecar"] = "sidecar"
    date: IsoDate

    def to_image(self) -> ImageRecord:
        return ImageRecord.model_validate(self.model_dump(exclude={"shape", "date"}))


class DayUnit(BaseModel):
    """A content file describing one whole day."""

    model_config = ConfigDict(extra="allow")

    shape: Literal["day"] = "day"
    date: IsoDate
    location: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    is_hero: Optional[bool] = None
    hero_index: Optional[int] = None
    images: List[ImageRecord] = Field(default_factory=list)

    def day_fields(self) -> Dict[str, Any]:
        """Day-level fields other than the images, including extras."""
        return self.model_dump(exclude={"shape", "images"}, exclude_none=True)


ContentUnit = Annotated[Union[SidecarUnit, DayUnit], Field(discriminator="shape")]
CONTENT_UNIT_ADAPTER: TypeAdapter = TypeAdapter(ContentUnit)
DAY_LIST_ADAPTER: TypeAdapter = TypeAdapter(List[DayRecord])


class AggregationBatch(BaseModel):
    """Aggregation result along with provenance metadata."""

    source_dir: str
    days: List[DayRecord] = Field(default_factory=list)
    files_read: int = 0
    issues: List[str] = Field(default_factory=list)

    @property
    def image_count(self) -> int:
        return sum(len(day.images) for day in self.days)
