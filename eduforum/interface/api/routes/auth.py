"""Account and session routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel

from eduforum.application.usecase.auth import (
    GetCurrentIdentityRequest,
    GetCurrentIdentityResponse,
    GetCurrentIdentityUseCase,
    LogInRequest,
    LogInUseCase,
    LogOutRequest,
    LogOutUseCase,
    SignUpRequest,
    SignUpUseCase,
)
from eduforum.config import SessionSettings
from eduforum.domain.error import DomainError, NotAuthenticatedError
from eduforum.domain.value import Role
from eduforum.interface.api.cookies import (
    clear_session_cookie,
    read_session_token,
    set_session_cookie,
)
from eduforum.interface.api.schemas import SuccessResponse
from eduforum.interface.error import (
    invalid_input,
    to_http_exception,
    unexpected_error,
)

router = APIRouter(prefix="/api", tags=["auth"], route_class=DishkaRoute)


class CredentialsAPIRequest(BaseModel):
    """Name and password as posted by the sign-up and log-in forms."""

    name: str
    password: str


async def _sign_up(
    role: Role,
    body: CredentialsAPIRequest,
    request: Request,
    response: Response,
    sign_up_use_case: SignUpUseCase,
    session_settings: SessionSettings,
) -> SuccessResponse:
    try:
        result = await sign_up_use_case.execute(
            SignUpRequest(
                name=body.name,
                password=body.password,
                role=role,
                previous_token=read_session_token(request, session_settings),
            )
        )
    except DomainError as e:
        raise to_http_exception(e, f"{role.value} sign-up")
    except ValueError as e:
        raise invalid_input(f"{role.value} sign-up", e)
    except Exception as e:
        raise unexpected_error(f"{role.value} sign-up", e)

    set_session_cookie(response, result.token, session_settings)
    return SuccessResponse(success=True)


async def _log_in(
    role: Role,
    body: CredentialsAPIRequest,
    request: Request,
    response: Response,
    log_in_use_case: LogInUseCase,
    session_settings: SessionSettings,
) -> SuccessResponse:
    try:
        result = await log_in_use_case.execute(
            LogInRequest(
                name=body.name,
                password=body.password,
                role=role,
                previous_token=read_session_token(request, session_settings),
            )
        )
    except DomainError as e:
        raise to_http_exception(e, f"{role.value} log-in")
    except Exception as e:
        raise unexpected_error(f"{role.value} log-in", e)

    set_session_cookie(response, result.token, session_settings)
    return SuccessResponse(success=True)


@router.post("/student-signup", response_model=SuccessResponse)
async def student_signup(
    body: CredentialsAPIRequest,
    request: Request,
    response: Response,
    sign_up_use_case: FromDishka[SignUpUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Create a Student account and log it in."""
    return await _sign_up(
        Role.STUDENT, body, request, response, sign_up_use_case, session_settings
    )


@router.post("/admin-signup", response_model=SuccessResponse)
async def admin_signup(
    body: CredentialsAPIRequest,
    request: Request,
    response: Response,
    sign_up_use_case: FromDishka[SignUpUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Create an Admin account and log it in."""
    return await _sign_up(
        Role.ADMIN, body, request, response, sign_up_use_case, session_settings
    )


@router.post("/login-student", response_model=SuccessResponse)
async def login_student(
    body: CredentialsAPIRequest,
    request: Request,
    response: Response,
    log_in_use_case: FromDishka[LogInUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Log in as a Student."""
    return await _log_in(
        Role.STUDENT, body, request, response, log_in_use_case, session_settings
    )


@router.post("/login-admin", response_model=SuccessResponse)
async def login_admin(
    body: CredentialsAPIRequest,
    request: Request,
    response: Response,
    log_in_use_case: FromDishka[LogInUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Log in as an Admin."""
    return await _log_in(
        Role.ADMIN, body, request, response, log_in_use_case, session_settings
    )


@router.post("/logout", response_model=SuccessResponse)
async def logout(
    request: Request,
    response: Response,
    log_out_use_case: FromDishka[LogOutUseCase],
    session_settings: FromDishka[SessionSettings],
) -> SuccessResponse:
    """Destroy the caller's session and clear its cookie.

    Raises:
        HTTPException: 400 if there is no session to destroy
    """
    try:
        await log_out_use_case.execute(
            LogOutRequest(token=read_session_token(request, session_settings))
        )
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DomainError as e:
        raise to_http_exception(e, "Log-out")
    except Exception as e:
        raise unexpected_error("log-out", e)

    clear_session_cookie(response, session_settings)
    return SuccessResponse(success=True)


async def _current_identity(
    request: Request,
    get_current_identity_use_case: GetCurrentIdentityUseCase,
    session_settings: SessionSettings,
) -> GetCurrentIdentityResponse:
    try:
        return await get_current_identity_use_case.execute(
            GetCurrentIdentityRequest(token=read_session_token(request, session_settings))
        )
    except NotAuthenticatedError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )


@router.get("/me", response_model=GetCurrentIdentityResponse)
async def get_me(
    request: Request,
    get_current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    session_settings: FromDishka[SessionSettings],
) -> GetCurrentIdentityResponse:
    """Return the name and role bound to the caller's session.

    Examples:
        {"name": "alice", "userType": "Student"}
    """
    return await _current_identity(
        request, get_current_identity_use_case, session_settings
    )


@router.get("/check-user-role", response_model=GetCurrentIdentityResponse)
async def check_user_role(
    request: Request,
    get_current_identity_use_case: FromDishka[GetCurrentIdentityUseCase],
    session_settings: FromDishka[SessionSettings],
) -> GetCurrentIdentityResponse:
    """Same answer as /api/me, kept for the frontend's role check."""
    return await _current_identity(
        request, get_current_identity_use_case, session_settings
    )
