"""Session CRUD: every request under /sessions is handed to the dispatcher."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from conference.dispatcher import SessionDispatcher

router = APIRouter()

# Registered for every method so the dispatcher, not the framework,
# decides between 404 and 405 under /sessions.
_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def get_dispatcher(request: Request) -> SessionDispatcher:
    return request.app.state.dispatcher


@router.api_route("/sessions", methods=_ALL_METHODS, include_in_schema=False)
@router.api_route("/sessions/{remainder:path}", methods=_ALL_METHODS, include_in_schema=False)
async def sessions(
    request: Request,
    dispatcher: SessionDispatcher = Depends(get_dispatcher),
) -> Response:
    body = await request.body()
    reply = dispatcher.dispatch(request.method, request.url.path, body)
    return Response(
        content=reply.body,
        status_code=reply.status_code,
        headers=reply.headers,
    )
