from filemaster.backend.app.domain.users.entities import User, UserStats
from filemaster.backend.app.domain.users.errors import (
    RegistrationError,
    InvalidCredentialsError,
    InactiveUserError,
    UserNotFoundError
)

from filemaster.backend.app.domain.users.value_objects import UserEmail

__all__ = ['UserEmail', 'User', 'UserStats', 'RegistrationError', 'InvalidCredentialsError', 'InactiveUserError',
           'UserNotFoundError']
