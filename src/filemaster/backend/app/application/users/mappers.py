from filemaster.backend.app.application.users import RegisterUserOutput, RegisterUserInput, LoginUserOutputDTO, \
    CurrentUserDTO, UserStatsDTO
from filemaster.backend.app.domain.users import User, UserEmail, UserStats


def register_domain_to_output_dto(user: User) -> RegisterUserOutput:
    return RegisterUserOutput(
        id=user.id,
        email=str(user.email),
        name=user.name,
        created_at=user.created_at
    )


def register_input_dto_to_domain(data: RegisterUserInput, hashed_password: str) -> User:
    return User(
        email=UserEmail(data.email),
        name=data.name,
        hashed_password=hashed_password,
    )


def login_domain_to_output_dto(user: User) -> LoginUserOutputDTO:
    return LoginUserOutputDTO(
        id=user.id,
        email=str(user.email),
        is_active=user.is_active
    )


def stats_domain_to_dto(stats: UserStats) -> UserStatsDTO:
    return UserStatsDTO(
        total_files=stats.total_files,
        total_size=stats.total_size,
        total_compressed=stats.total_compressed,
        space_saved=stats.space_saved,
        total_downloads=stats.total_downloads,
    )


def current_domain_to_output_dto(user: User) -> CurrentUserDTO:
    return CurrentUserDTO(
        id=user.id,
        email=str(user.email),
        name=user.name,
        is_active=user.is_active,
        stats=stats_domain_to_dto(user.stats),
    )
