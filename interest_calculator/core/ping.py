"""Health-check payload, reporting the display locale in use."""

from interest_calculator.config import CURRENCY_CODE, LOCALE
from interest_calculator.schemas.ping import PingResponse


def get_ping_response() -> PingResponse:
    return PingResponse(message="pong", locale=LOCALE, currency=CURRENCY_CODE)
