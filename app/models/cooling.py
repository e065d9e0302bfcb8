from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CoolingType(str, Enum):
    """Cooling strategies a battery pack can be built with."""

    PASSIVE_COOLING = "passive_cooling"
    HI_ACTIVE_COOLING = "hi_active_cooling"
    MED_ACTIVE_COOLING = "med_active_cooling"


class CoolingConfig(BaseModel):
    """Safe temperature range (inclusive, degrees Celsius) of a cooling type."""

    model_config = ConfigDict(frozen=True)

    lower_limit: int = Field(
        ...,
        description="Lowest temperature still considered normal",
    )
    upper_limit: int = Field(
        ...,
        description="Highest temperature still considered normal",
    )

    @model_validator(mode="after")
    def _check_range(self) -> "CoolingConfig":
        if self.lower_limit >= self.upper_limit:
            raise ValueError(
                f"lower_limit ({self.lower_limit}) must be below "
                f"upper_limit ({self.upper_limit})"
            )
        return self


class CoolingProfile(CoolingConfig):
    """CoolingConfig together with the cooling type it belongs to."""

    cooling_type: CoolingType = Field(..., description="Cooling type of this profile")
