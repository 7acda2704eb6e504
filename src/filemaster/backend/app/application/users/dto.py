from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class RegisterUserInput:
    email: str
    name: str
    password: str


@dataclass
class RegisterUserOutput:
    id: UUID
    email: str
    name: str
    created_at: datetime


@dataclass
class LoginUserInputDTO:
    email: str
    password: str


@dataclass
class LoginUserOutputDTO:
    id: UUID
    email: str
    is_active: bool


@dataclass
class UserStatsDTO:
    total_files: int = 0
    total_size: int = 0
    total_compressed: int = 0
    space_saved: int = 0
    total_downloads: int = 0


@dataclass
class CurrentUserDTO:
    id: UUID
    email: str
    name: str
    is_active: bool
    stats: UserStatsDTO = field(default_factory=UserStatsDTO)
