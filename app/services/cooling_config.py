import logging
from typing import Dict

from app.errors import UnknownCoolingTypeError
from app.models.cooling import CoolingConfig, CoolingType

logger = logging.getLogger(__name__)

# Fixed thresholds per cooling type; not configurable at runtime
_COOLING_TABLE: Dict[CoolingType, CoolingConfig] = {
    CoolingType.PASSIVE_COOLING: CoolingConfig(lower_limit=0, upper_limit=35),
    CoolingType.HI_ACTIVE_COOLING: CoolingConfig(lower_limit=0, upper_limit=45),
    CoolingType.MED_ACTIVE_COOLING: CoolingConfig(lower_limit=0, upper_limit=40),
}


def get_cooling_config(cooling_type: CoolingType) -> CoolingConfig:
    """
    Return the safe temperature range for a cooling type.

    Raises UnknownCoolingTypeError for anything that is not one of the three
    known CoolingType members; there is no fallback range.
    """
    try:
        return _COOLING_TABLE[cooling_type]
    except (KeyError, TypeError) as exc:
        logger.warning("Rejecting unknown cooling type %r", cooling_type)
        raise UnknownCoolingTypeError(cooling_type) from exc


def list_cooling_configs() -> Dict[CoolingType, CoolingConfig]:
    return dict(_COOLING_TABLE)
