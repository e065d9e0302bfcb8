class TypewiseAlertError(ValueError):
    """Base class for errors raised by the alert pipeline."""


class UnknownCoolingTypeError(TypewiseAlertError):
    """Raised when a value outside the known cooling types is looked up."""

    def __init__(self, cooling_type: object) -> None:
        super().__init__(f"Unknown cooling type: {cooling_type!r}")
        self.cooling_type = cooling_type


class UnknownAlertTargetError(TypewiseAlertError):
    """Raised when an alert is routed to a target without a channel."""

    def __init__(self, target: object) -> None:
        super().__init__(f"Unknown alert target: {target!r}")
        self.target = target
