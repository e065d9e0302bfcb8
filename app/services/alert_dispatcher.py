import logging
import sys
from typing import Dict, Optional, Protocol, TextIO

from app.errors import UnknownAlertTargetError
from app.models.alert import AlertTarget, BreachType

logger = logging.getLogger(__name__)

# Fixed simulated endpoints
EMAIL_RECIPIENT = "a.b@c.com"
CONTROLLER_FEED_LABEL = "feed"


class AlertChannel(Protocol):
    def format(self, breach_type: BreachType) -> str:
        ...


class EmailAlert:
    """Simulated e-mail: recipient header plus one line per breach direction."""

    _BODIES = {
        BreachType.TOO_LOW: "Hi, the temperature is too low",
        BreachType.TOO_HIGH: "Hi, the temperature is too high",
    }

    def format(self, breach_type: BreachType) -> str:
        text = f"To: {EMAIL_RECIPIENT}\n"
        body = self._BODIES.get(breach_type)
        if body is not None:
            text += f"{body}\n"
        return text


class ControllerAlert:
    """Simulated controller feed carrying the breach ordinal."""

    def format(self, breach_type: BreachType) -> str:
        return f"{CONTROLLER_FEED_LABEL} : {int(breach_type)}\n"


_CHANNELS: Dict[AlertTarget, AlertChannel] = {
    AlertTarget.TO_CONTROLLER: ControllerAlert(),
    AlertTarget.TO_EMAIL: EmailAlert(),
}


def get_alert_channel(target: AlertTarget) -> AlertChannel:
    """
    Return the channel responsible for an alert target.

    Raises UnknownAlertTargetError if no channel is registered for target.
    """
    try:
        return _CHANNELS[target]
    except (KeyError, TypeError) as exc:
        logger.warning("Rejecting unknown alert target %r", target)
        raise UnknownAlertTargetError(target) from exc


def _emit(text: str, stream: Optional[TextIO]) -> str:
    # sys.stdout is looked up per call so redirected output is honoured
    out = stream if stream is not None else sys.stdout
    out.write(text)
    out.flush()
    return text


def dispatch_alert(
    target: AlertTarget,
    breach_type: BreachType,
    stream: Optional[TextIO] = None,
) -> str:
    """
    Format breach_type for target, write it to stream and return the text.

    The target and breach type are both validated before anything is
    written: an unknown target raises UnknownAlertTargetError, an
    out-of-range breach code raises ValueError.
    """
    breach_type = BreachType(breach_type)
    channel = get_alert_channel(target)
    text = channel.format(breach_type)
    logger.debug("Dispatching %r via %r", breach_type, target)
    return _emit(text, stream)


def send_to_email(breach_type: BreachType, stream: Optional[TextIO] = None) -> str:
    return dispatch_alert(AlertTarget.TO_EMAIL, breach_type, stream)


def send_to_controller(breach_type: BreachType, stream: Optional[TextIO] = None) -> str:
    return dispatch_alert(AlertTarget.TO_CONTROLLER, breach_type, stream)
