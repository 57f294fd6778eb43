from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# device ticks of 100 ms
DEFAULT_TRANSITION = 200

MAX_DEVICE_BRIGHTNESS = 254

Coordinate = Annotated[float, Field(ge=0.0, le=1.0)]


class StateCommand(BaseModel):
    """Attribute set of one ``lights/<id>/state`` update."""

    model_config = ConfigDict(frozen=True)

    on: Optional[bool] = None
    bri: Optional[int] = Field(None, ge=0, le=MAX_DEVICE_BRIGHTNESS)
    xy: Optional[tuple[Coordinate, Coordinate]] = None
    effect: Optional[Literal["none", "colorloop"]] = None
    transition: Optional[int] = Field(None, ge=0)

    def attributes(self) -> dict[str, Any]:
        # only the attributes that were set; xy goes out as a JSON list
        return self.model_dump(mode="json", exclude_none=True)


class OnCommand(StateCommand):
    on: bool


class BrightnessCommand(StateCommand):
    bri: int = Field(..., ge=0, le=MAX_DEVICE_BRIGHTNESS)


class ColorCommand(StateCommand):
    xy: tuple[Coordinate, Coordinate]


class EffectCommand(StateCommand):
    effect: Literal["none", "colorloop"]
