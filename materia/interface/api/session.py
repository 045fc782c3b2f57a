"""Session token extraction."""

from typing import Optional

from fastapi import Request

from materia.config import AuthSettings


async def get_session_token(request: Request) -> Optional[str]:
    """Read the session token from the configured cookie.

    Used as a FastAPI dependency; the request container is opened by the
    dependency injection middleware before dependencies run.
    """
    auth_settings = await request.state.dishka_container.get(AuthSettings)
    return request.cookies.get(auth_settings.session_cookie)
