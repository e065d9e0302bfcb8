from typing import Optional, TextIO

from app.models.alert import AlertTarget, BatteryCharacter, BreachType
from app.services.alert_dispatcher import dispatch_alert
from app.services.breach_detector import classify_temperature_breach


def check_and_alert(
    target: AlertTarget,
    battery: BatteryCharacter,
    temperature_value: float,
    stream: Optional[TextIO] = None,
) -> BreachType:
    """
    Classify a battery's temperature and send the result to target.

    The channel for target is looked up in the dispatcher's registry, so an
    unknown target (UnknownAlertTargetError) or cooling type
    (UnknownCoolingTypeError) never leaves partial output on the stream.
    Returns the breach type.
    """
    breach = classify_temperature_breach(battery.cooling_type, temperature_value)
    dispatch_alert(target, breach, stream)
    return breach
