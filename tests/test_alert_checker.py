import pytest

from app.errors import UnknownAlertTargetError, UnknownCoolingTypeError
from app.models.alert import AlertTarget, BatteryCharacter, BreachType
from app.models.cooling import CoolingType
from app.services import alert_dispatcher
from app.services.alert_checker import check_and_alert


@pytest.mark.parametrize(
    "cooling_type, label, temperature, expected",
    [
        (CoolingType.PASSIVE_COOLING, "Battery 1", 50, "feed : 2\n"),
        (CoolingType.HI_ACTIVE_COOLING, "Battery 2", -5, "feed : 1\n"),
        (CoolingType.MED_ACTIVE_COOLING, "Battery 3", 30, "feed : 0\n"),
    ],
)
def test_check_and_alert_to_controller(capsys, cooling_type, label, temperature, expected):
    battery = BatteryCharacter(cooling_type=cooling_type, label=label)
    check_and_alert(AlertTarget.TO_CONTROLLER, battery, temperature)
    assert capsys.readouterr().out == expected


@pytest.mark.parametrize(
    "cooling_type, label, temperature, expected",
    [
        (
            CoolingType.PASSIVE_COOLING,
            "Battery 4",
            50,
            "To: a.b@c.com\nHi, the temperature is too high\n",
        ),
        (
            CoolingType.HI_ACTIVE_COOLING,
            "Battery 5",
            -5,
            "To: a.b@c.com\nHi, the temperature is too low\n",
        ),
        (CoolingType.MED_ACTIVE_COOLING, "Battery 6", 30, "To: a.b@c.com\n"),
    ],
)
def test_check_and_alert_to_email(capsys, cooling_type, label, temperature, expected):
    battery = BatteryCharacter(cooling_type=cooling_type, label=label)
    check_and_alert(AlertTarget.TO_EMAIL, battery, temperature)
    assert capsys.readouterr().out == expected


def test_check_and_alert_returns_breach_type(capsys):
    battery = BatteryCharacter(cooling_type=CoolingType.PASSIVE_COOLING)
    assert check_and_alert(AlertTarget.TO_EMAIL, battery, 50) == BreachType.TOO_HIGH
    capsys.readouterr()


def test_label_does_not_affect_outcome(capsys):
    plain = BatteryCharacter(cooling_type=CoolingType.PASSIVE_COOLING)
    branded = BatteryCharacter(cooling_type=CoolingType.PASSIVE_COOLING, label="BrandX")

    check_and_alert(AlertTarget.TO_CONTROLLER, plain, 36)
    first = capsys.readouterr().out
    check_and_alert(AlertTarget.TO_CONTROLLER, branded, 36)
    assert capsys.readouterr().out == first == "feed : 2\n"


def test_unknown_target_raises_before_any_output(capsys):
    battery = BatteryCharacter(cooling_type=CoolingType.PASSIVE_COOLING)
    with pytest.raises(UnknownAlertTargetError):
        check_and_alert("TO_PAGER", battery, 50)
    assert capsys.readouterr().out == ""


def test_unknown_cooling_type_raises_before_any_output(capsys):
    battery = BatteryCharacter.model_construct(cooling_type="LIQUID_COOLING", label="")
    with pytest.raises(UnknownCoolingTypeError):
        check_and_alert(AlertTarget.TO_EMAIL, battery, 20)
    assert capsys.readouterr().out == ""


def test_check_and_alert_routes_through_channel_registry(monkeypatch, capsys):
    class RecordingChannel:
        def format(self, breach_type):
            return f"recorded {breach_type.name}\n"

    monkeypatch.setitem(
        alert_dispatcher._CHANNELS, AlertTarget.TO_EMAIL, RecordingChannel()
    )
    battery = BatteryCharacter(cooling_type=CoolingType.PASSIVE_COOLING)
    check_and_alert(AlertTarget.TO_EMAIL, battery, 50)
    assert capsys.readouterr().out == "recorded TOO_HIGH\n"


def test_unregistered_target_is_not_sent_by_email(monkeypatch, capsys):
    monkeypatch.delitem(alert_dispatcher._CHANNELS, AlertTarget.TO_EMAIL)
    battery = BatteryCharacter(cooling_type=CoolingType.PASSIVE_COOLING)
    with pytest.raises(UnknownAlertTargetError):
        check_and_alert(AlertTarget.TO_EMAIL, battery, 50)
    assert capsys.readouterr().out == ""
