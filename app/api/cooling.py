from typing import List

from fastapi import APIRouter

from app.models.cooling import CoolingProfile, CoolingType
from app.services import cooling_config

router = APIRouter()


@router.get(
    "/profiles",
    response_model=List[CoolingProfile],
    summary="Cooling profiles",
)
async def cooling_profiles() -> List[CoolingProfile]:
    """
    Return the safe temperature range of every known cooling type.

    The table is fixed; there is no way to change thresholds at runtime.
    """
    return [
        CoolingProfile(cooling_type=cooling_type, **config.model_dump())
        for cooling_type, config in cooling_config.list_cooling_configs().items()
    ]


@router.get(
    "/profiles/{cooling_type}",
    response_model=CoolingProfile,
    summary="Single cooling profile",
)
async def cooling_profile(cooling_type: CoolingType) -> CoolingProfile:
    # Unknown values are rejected with 422 by the path parameter enum
    config = cooling_config.get_cooling_config(cooling_type)
    return CoolingProfile(cooling_type=cooling_type, **config.model_dump())
