import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger("mobile-backend")

MALFORMED_JSON_DETAIL = "Malformed JSON body"

class MalformedBody(Exception):
    """Raised when a JSON request body can't be decoded."""

async def malformed_body_handler(request: Request, exc: MalformedBody):
    logger.warning("Rejected malformed JSON body on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": MALFORMED_JSON_DETAIL})

def register(app):
    app.add_exception_handler(MalformedBody, malformed_body_handler)
