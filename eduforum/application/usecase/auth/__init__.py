"""Auth use cases."""

from .get_current_identity import (
    GetCurrentIdentityRequest,
    GetCurrentIdentityResponse,
    GetCurrentIdentityUseCase,
)
from .log_in import LogInRequest, LogInResponse, LogInUseCase
from .log_out import LogOutRequest, LogOutResponse, LogOutUseCase
from .sign_up import SignUpRequest, SignUpResponse, SignUpUseCase

__all__ = [
    "GetCurrentIdentityRequest",
    "GetCurrentIdentityResponse",
    "GetCurrentIdentityUseCase",
    "LogInRequest",
    "LogInResponse",
    "LogInUseCase",
    "LogOutRequest",
    "LogOutResponse",
    "LogOutUseCase",
    "SignUpRequest",
    "SignUpResponse",
    "SignUpUseCase",
]
