import logging

from app.models.alert import BreachType
from app.models.cooling import CoolingType
from app.services.cooling_config import get_cooling_config

logger = logging.getLogger(__name__)


def infer_breach(value: float, lower_limit: float, upper_limit: float) -> BreachType:
    """Classify value against an inclusive [lower_limit, upper_limit] range."""
    if value < lower_limit:
        return BreachType.TOO_LOW
    if value > upper_limit:
        return BreachType.TOO_HIGH
    return BreachType.NORMAL


def classify_temperature_breach(cooling_type: CoolingType, value: float) -> BreachType:
    """
    Classify a temperature reading against the limits of a cooling type.

    Propagates UnknownCoolingTypeError from the cooling config lookup.
    """
    config = get_cooling_config(cooling_type)
    breach = infer_breach(value, config.lower_limit, config.upper_limit)
    logger.debug(
        "Temperature %s with %r (%s..%s) classified as %r",
        value,
        cooling_type,
        config.lower_limit,
        config.upper_limit,
        breach,
    )
    return breach
