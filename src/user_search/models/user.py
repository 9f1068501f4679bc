"""User response model for the User API."""

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """User as returned by the search endpoint."""

    id: int = Field(..., description="Identifier generated by the database")
    name: str | None = Field(None, description="Name of the user")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Alice",
            }
        },
    )
