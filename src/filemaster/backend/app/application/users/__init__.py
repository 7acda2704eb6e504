from filemaster.backend.app.application.users.dto import (
    RegisterUserInput,
    RegisterUserOutput,
    LoginUserInputDTO,
    LoginUserOutputDTO,
    UserStatsDTO,
    CurrentUserDTO,
)

__all__ = ['RegisterUserInput', 'RegisterUserOutput', 'LoginUserInputDTO', 'LoginUserOutputDTO', 'UserStatsDTO',
           'CurrentUserDTO']
