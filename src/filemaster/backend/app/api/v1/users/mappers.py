from __future__ import annotations
from pydantic import EmailStr, TypeAdapter
from filemaster.backend.app.api.v1.users.schemas import (
    LoginRequest,
    MeResponse,
    RegisterUserRequest,
    UserResponse,
    UserStatsResponse,
)
from filemaster.backend.app.application.users import (
    CurrentUserDTO,
    LoginUserInputDTO,
    RegisterUserInput,
    RegisterUserOutput,
)


def request_to_input_dto(user_request: RegisterUserRequest) -> RegisterUserInput:
    return RegisterUserInput(
        email=str(user_request.email),
        name=user_request.name,
        password=user_request.password
    )


def output_dto_to_response(user: RegisterUserOutput) -> UserResponse:
    email = TypeAdapter(EmailStr).validate_python(user.email)
    return UserResponse(
        id=user.id,
        email=email,
        name=user.name,
        created_at=user.created_at,
    )


def login_request_to_input_dto(data: LoginRequest) -> LoginUserInputDTO:
    return LoginUserInputDTO(
        email=str(data.email),
        password=data.password,
    )


def current_user_to_response(user: CurrentUserDTO) -> MeResponse:
    return MeResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        is_active=user.is_active,
        stats=UserStatsResponse(
            total_files=user.stats.total_files,
            total_size=user.stats.total_size,
            total_compressed=user.stats.total_compressed,
            space_saved=user.stats.space_saved,
            total_downloads=user.stats.total_downloads,
        ),
    )
