"""Authentication DTOs for the application layer."""

from pydantic import BaseModel, Field

from account_auth.application.dtos.account_dto import Username


class LoginDTO(BaseModel):
    """DTO for login request."""

    username: Username
    password: str = Field(..., min_length=1, description="Account password")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "alice",
                    "password": "securepassword123"
                }
            ]
        }
    }


class ChangePasswordDTO(BaseModel):
    """DTO for password change request."""

    username: Username
    old_password: str = Field(..., min_length=1, description="Current password")
    new_password: str = Field(..., min_length=8, description="Replacement password")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "alice",
                    "old_password": "securepassword123",
                    "new_password": "evenmoresecure456"
                }
            ]
        }
    }
