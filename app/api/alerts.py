import io

from fastapi import APIRouter, HTTPException

from app.errors import TypewiseAlertError
from app.models.alert import AlertCheckRequest, AlertCheckResult
from app.services import alert_checker

router = APIRouter()


@router.post(
    "/check",
    response_model=AlertCheckResult,
    summary="Classify a temperature and dispatch the alert",
)
async def check_alert(request: AlertCheckRequest) -> AlertCheckResult:
    """
    Run the alert pipeline for a single battery reading.

    The text that would be written to the alert channel is captured and
    returned in the response body instead of going to stdout. Errors from
    the service layer (unknown cooling type or alert target) are returned
    as HTTP 400 Bad Request.
    """
    buffer = io.StringIO()
    try:
        breach = alert_checker.check_and_alert(
            request.target,
            request.battery,
            request.temperature,
            stream=buffer,
        )
    except TypewiseAlertError as exc:
        raise HTTPException(
            status_code=400,
            detail=str(exc),
        ) from exc

    return AlertCheckResult(
        target=request.target,
        breach_type=breach.name,
        breach_code=int(breach),
        message=buffer.getvalue(),
    )
