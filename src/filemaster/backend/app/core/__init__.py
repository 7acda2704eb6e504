from filemaster.backend.app.core.config import settings
from filemaster.backend.app.core.security import BcryptPasswordHasher

__all__ = ['settings',
           'BcryptPasswordHasher']
