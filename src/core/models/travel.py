"""Pydantic models for travels and their locations."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TravelStatus(str, Enum):
    PENDING = "pending"
    IN_PROCESS = "in_process"
    READY = "ready"


# Lifecycle order; a travel may only stay in place or advance one step.
STATUS_FLOW: list[TravelStatus] = [TravelStatus.PENDING, TravelStatus.IN_PROCESS, TravelStatus.READY]


class Point(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float
    longitude: float

    def to_storage(self) -> str:
        """Encode as ``"<lat>, <lng>"`` using the shortest exact float repr."""
        return f"{self.latitude!r}, {self.longitude!r}"

    @classmethod
    def from_storage(cls, value: str) -> "Point":
        parts = value.split(", ")
        if len(parts) != 2:
            raise ValueError(f"invalid stored point: {value!r}")
        return cls(latitude=float(parts[0]), longitude=float(parts[1]))


class _TravelFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: Point = Field(..., alias="from")
    to: Point
    user_id: int = Field(default=0, ge=0)

    @field_validator("user_id", mode="before")
    @classmethod
    def unassigned_as_zero(cls, value: object) -> object:
        return 0 if value is None else value

    @property
    def is_assigned(self) -> bool:
        return self.user_id != 0


class Travel(_TravelFields):
    id: int = 0
    status: TravelStatus = TravelStatus.PENDING

    def to_public(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)


class TravelRequest(_TravelFields):
    """Travel state submitted by a caller on create or update.

    ``status`` is kept as a free string so unknown values reach the
    validation engine and are rejected there.
    """

    status: str = ""
