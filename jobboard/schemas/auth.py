from pydantic import BaseModel, Field, field_validator

from jobboard.core.validators import PASSWORD_RULES, is_valid_email, is_valid_password


class UserRegister(BaseModel):
    email: str
    password: str
    name: str | None = Field(default=None, max_length=100)

    @field_validator("email")
    @classmethod
    def email_format(cls, v: str) -> str:
        v = v.strip()
        if not is_valid_email(v):
            raise ValueError("Invalid email format")
        return v

    @field_validator("password")
    @classmethod
    def password_strength(cls, v: str) -> str:
        if not is_valid_password(v):
            raise ValueError(PASSWORD_RULES)
        return v


class UserLogin(BaseModel):
    email: str
    password: str


class GoogleAuthRequest(BaseModel):
    token: str = Field(min_length=1)


class UserResponse(BaseModel):
    id: str
    email: str
    name: str | None = None
    is_admin: bool = False
    avatar: str | None = None

    class Config:
        from_attributes = True


class UserProfileUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    avatar: str | None = Field(default=None, max_length=2000)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
