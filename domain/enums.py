"""
Domain enums for the food details screen.
Contains all enumeration types used across the domain models.
"""

import enum


class LoadStatus(str, enum.Enum):
    """Initialization phases of a screen"""

    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


class FavoriteState(str, enum.Enum):
    """Favorite toggle states"""

    NOT_FAVORITE = "not_favorite"
    FAVORITE = "favorite"

    @classmethod
    def from_flag(cls, is_favorite: bool) -> "FavoriteState":
        return cls.FAVORITE if is_favorite else cls.NOT_FAVORITE

    @property
    def icon_name(self) -> str:
        """Material icon shown in the screen header"""
        return "favorite" if self is FavoriteState.FAVORITE else "favorite-border"
