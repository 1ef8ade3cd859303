"""Session cookie helpers."""

from fastapi import Request, Response

from eduforum.config import SessionSettings


def read_session_token(request: Request, session_settings: SessionSettings) -> str | None:
    """Read the session token from the request cookies."""
    return request.cookies.get(session_settings.cookie_name)


def set_session_cookie(
    response: Response, token: str, session_settings: SessionSettings
) -> None:
    """Attach a fresh session cookie.

    No max-age is set: the server enforces the inactivity timeout.
    """
    response.set_cookie(
        key=session_settings.cookie_name,
        value=token,
        httponly=True,
        secure=session_settings.cookie_secure,
        # Cross-site frontend needs SameSite=None, which browsers only accept with Secure
        samesite="none" if session_settings.cookie_secure else "lax",
        path="/",
    )


def clear_session_cookie(response: Response, session_settings: SessionSettings) -> None:
    """Expire the session cookie on the client."""
    response.delete_cookie(
        key=session_settings.cookie_name,
        path="/",
        httponly=True,
        secure=session_settings.cookie_secure,
        samesite="none" if session_settings.cookie_secure else "lax",
    )
