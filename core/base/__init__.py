"""Base classes for the service layer"""

from core.base.base_service import BaseService

__all__ = ["BaseService"]
