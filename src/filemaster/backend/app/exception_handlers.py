import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from filemaster.backend.app.domain.files.errors import FailedToSaveFile, FileTooLarge
from filemaster.backend.app.domain.processing.errors import (
    InputValidationError,
    ProcessedFileNotFound,
    ProcessingFailure,
)
from filemaster.backend.app.domain.users import InvalidCredentialsError, InactiveUserError, UserNotFoundError, \
    RegistrationError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials(_: Request, __: InvalidCredentialsError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": "Invalid credentials"},
        )

    @app.exception_handler(InactiveUserError)
    async def inactive_user(_: Request, __: InactiveUserError):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": "User is inactive"},
        )

    @app.exception_handler(UserNotFoundError)
    async def user_not_found(_: Request, __: UserNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "User not found"},
        )

    @app.exception_handler(RegistrationError)
    async def registration_error(_: Request, exc: RegistrationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc) or "Registration failed"},
        )

    @app.exception_handler(InputValidationError)
    async def input_validation_error(_: Request, exc: InputValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ProcessingFailure)
    async def processing_failure(_: Request, exc: ProcessingFailure):
        # details were already logged where the failure happened
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ProcessedFileNotFound)
    async def processed_file_not_found(_: Request, exc: ProcessedFileNotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    @app.exception_handler(FileTooLarge)
    async def file_too_large(_: Request, exc: FileTooLarge):
        return JSONResponse(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            content={"detail": str(exc)},
        )

    @app.exception_handler(FailedToSaveFile)
    async def failed_to_save_file(_: Request, exc: FailedToSaveFile):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc) or "Failed to save file"},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(_: Request, exc: Exception):
        logger.exception("Unhandled exception", exc_info=exc)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error"
            },
        )
