from __future__ import annotations

from fastapi import Request, Response

from app.core.config import settings


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Headers": ", ".join(settings.cors_allow_headers),
    }


async def cors_middleware(request: Request, call_next) -> Response:
    """Answer preflights directly and stamp CORS headers on every response."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=cors_headers())

    response = await call_next(request)
    response.headers.update(cors_headers())
    return response
