from .base import Base
from .anime import Anime
from .advertisement import Advertisement
from .user_role import ADMIN_ROLE, UserRole

__all__ = [
    "Base",
    "Anime",
    "Advertisement",
    "UserRole",
    "ADMIN_ROLE",
]
