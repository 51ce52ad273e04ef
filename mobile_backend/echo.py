import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from .config import GREETING, DATA_RECEIVED_MESSAGE
from .errors import MalformedBody

router = APIRouter()

class DataEnvelope(BaseModel):
    message: str
    data: Any = None

def is_json_content_type(value):
    # A missing header is read as JSON, same as FastAPI's own body parsing
    if not value:
        return True
    media_type = value.split(";", 1)[0].strip().lower()
    main_type, _, subtype = media_type.partition("/")
    return main_type == "application" and (subtype == "json" or subtype.endswith("+json"))

def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")

async def json_body(request: Request):
    """Parsed request body, or None when it's empty or not sent as JSON."""
    raw = await request.body()
    if not raw or not is_json_content_type(request.headers.get("content-type")):
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise MalformedBody(str(e) or type(e).__name__) from e

@router.get("/", response_class=PlainTextResponse)
def greeting():
    return GREETING

@router.post("/api/data", response_model=DataEnvelope)
def receive_data(data: Any = Depends(json_body)):
    # Returned as-is so the echoed value skips model serialization
    return JSONResponse(content={"message": DATA_RECEIVED_MESSAGE, "data": data})
