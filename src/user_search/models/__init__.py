"""API response models."""

from user_search.models.health import HealthCheckResponse
from user_search.models.user import UserResponse

__all__ = ["HealthCheckResponse", "UserResponse"]
