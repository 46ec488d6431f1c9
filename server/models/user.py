# server/models/user.py

from pydantic import BaseModel, Field, ConfigDict


# -------------------------------
# Request Schemas
# -------------------------------

class Credentials(BaseModel):
    """
    Username/password pair sent in the body of every protected request.
    """
    username: str
    password: str


class RegisterRequest(Credentials):
    email: str


class ProfileUpdateRequest(Credentials):
    """
    Only the fields that are present are written back to the stored user.
    """
    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    new_password: str | None = Field(default=None, alias="newPassword")


# -------------------------------
# Response Schemas
# -------------------------------

class SafeUser(BaseModel):
    """
    A stored user without its password.
    """
    id: int
    username: str
    email: str | None = None


class LoginResponse(BaseModel):
    message: str
    user: SafeUser
