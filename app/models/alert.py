from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field

from app.models.cooling import CoolingType


class BreachType(IntEnum):
    # Ordinals are written to the controller feed
    NORMAL = 0
    TOO_LOW = 1
    TOO_HIGH = 2


class AlertTarget(str, Enum):
    TO_CONTROLLER = "to_controller"
    TO_EMAIL = "to_email"


class BatteryCharacter(BaseModel):
    """Battery under observation. Only the cooling type affects alerting."""

    model_config = ConfigDict(frozen=True)

    cooling_type: CoolingType = Field(
        ...,
        description="Cooling strategy the battery is built with",
    )
    label: str = Field(
        default="",
        description="Free-text description, e.g. the brand",
    )


class AlertCheckRequest(BaseModel):
    target: AlertTarget = Field(..., description="Channel the alert is routed to")
    battery: BatteryCharacter
    temperature: float = Field(
        ...,
        description="Measured temperature in degrees Celsius",
    )


class AlertCheckResult(BaseModel):
    """Outcome of a single alert check, as returned by the API."""

    target: AlertTarget
    breach_type: str = Field(
        ...,
        description="Name of the breach classification, e.g. TOO_HIGH",
    )
    breach_code: int = Field(
        ...,
        ge=0,
        le=2,
        description="Ordinal of the breach classification as sent to the controller",
    )
    message: str = Field(
        ...,
        description="Exact text emitted on the alert channel",
    )
