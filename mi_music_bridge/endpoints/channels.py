"""POST /channels/{name} — dispatch a method call onto a named channel."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from mi_music_bridge.channel import ERROR, SUCCESS

logger = logging.getLogger(__name__)

router = APIRouter()


class ChannelRequest(BaseModel):
    """A method call as sent by the UI layer."""

    method: str
    arguments: Optional[Any] = None


# Sync route so the config read runs in the threadpool, not on the event loop
@router.post("/channels/{name:path}")
def invoke_channel(name: str, body: ChannelRequest, request: Request):
    """Invoke ``body.method`` on channel ``name`` and translate the reply.

    - success → 200 ``{"status": "success", "result": ...}``
    - not implemented → 501 ``{"status": "notImplemented", "method": ...}``
    - handler error → 500 ``{"status": "error", "code", "message", "details"}``
    """
    registry = request.app.state.channels
    channel = registry.get(name)
    if channel is None:
        raise HTTPException(status_code=404, detail=f"Unknown channel: {name}")

    logger.info(f"Channel call: {name}#{body.method}")
    result = channel.invoke_method(body.method, body.arguments)

    if result.status == SUCCESS:
        return {"status": result.status, "result": result.value}

    if result.status == ERROR:
        return JSONResponse(
            status_code=500,
            content={
                "status": result.status,
                "code": result.code,
                "message": result.message,
                "details": result.details,
            },
        )

    return JSONResponse(
        status_code=501,
        content={"status": result.status, "method": body.method},
    )
