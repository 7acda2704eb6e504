from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from filemaster.backend.app.api.v1.users.deps import (
    get_logged_in_user,
    get_login_user_use_case,
    get_register_user_use_case,
)
from filemaster.backend.app.api.v1.users.mappers import (
    current_user_to_response,
    login_request_to_input_dto,
    output_dto_to_response,
    request_to_input_dto,
)
from filemaster.backend.app.api.v1.users.schemas import (
    LoginRequest,
    MeResponse,
    RegisterUserRequest,
    TokenResponse,
    UserResponse,
)
from filemaster.backend.app.application.users import CurrentUserDTO, RegisterUserOutput
from filemaster.backend.app.application.users.use_cases import LoginUserUseCase, RegisterUserUseCase
from filemaster.backend.app.core.security import create_access_token
from filemaster.backend.app.domain.users import InactiveUserError, InvalidCredentialsError, RegistrationError

router = APIRouter(prefix="/auth", tags=["auth"])

register_user_dep = Annotated[RegisterUserUseCase, Depends(get_register_user_use_case)]
login_user_dep = Annotated[LoginUserUseCase, Depends(get_login_user_use_case)]
logged_in_user_dep = Annotated[CurrentUserDTO, Depends(get_logged_in_user)]


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_user(
    body: RegisterUserRequest,
    use_case: register_user_dep,
) -> UserResponse:
    try:
        input_dto = request_to_input_dto(body)
        result: RegisterUserOutput = await use_case.execute(input_dto)
    except RegistrationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    return output_dto_to_response(result)


@router.post(
    path="/token",
    response_model=TokenResponse)
async def login(
    payload: LoginRequest,
    use_case: login_user_dep
) -> TokenResponse:
    input_dto = login_request_to_input_dto(payload)

    try:
        result = await use_case.execute(input_dto)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Incorrect email or password",
        )
    except InactiveUserError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )

    access_token = create_access_token(subject=str(result.id))
    return TokenResponse(access_token=access_token)


@router.get("/me", response_model=MeResponse)
async def get_me(current_user: logged_in_user_dep) -> MeResponse:
    return current_user_to_response(current_user)
