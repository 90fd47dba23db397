"""Business service package for activity management."""

from .activity_service import RevOpsActivityService
from .interfaces import ActivityServicePort

__all__ = ["ActivityServicePort", "RevOpsActivityService"]
