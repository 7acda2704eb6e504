from filemaster.backend.app.domain.users import User, UserEmail, UserStats
from filemaster.backend.app.infrastructure.users.models import UserModel


def user_model_to_domain(model: UserModel) -> User:
    return User(
        id=model.id,
        email=UserEmail(model.email),
        name=model.name,
        hashed_password=model.hashed_password,
        is_active=model.is_active,
        created_at=model.created_at,
        stats=UserStats(
            total_files=model.total_files or 0,
            total_size=model.total_size or 0,
            total_compressed=model.total_compressed or 0,
            space_saved=model.space_saved or 0,
            total_downloads=model.total_downloads or 0,
        ),
    )


def user_domain_to_model(user: User) -> UserModel:
    return UserModel(
        id=user.id,
        email=user.email.value,
        name=user.name,
        hashed_password=user.hashed_password,
        is_active=user.is_active,
        created_at=user.created_at,
        total_files=user.stats.total_files,
        total_size=user.stats.total_size,
        total_compressed=user.stats.total_compressed,
        space_saved=user.stats.space_saved,
        total_downloads=user.stats.total_downloads,
    )
