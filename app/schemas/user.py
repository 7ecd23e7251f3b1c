from pydantic import EmailStr, Field
from app.schemas.common import CamelModel

class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)

class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)

class UserOut(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str
    profile_image_url: str | None = None

class UserEnvelope(CamelModel):
    user: UserOut

class UsersEnvelope(CamelModel):
    users: list[UserOut]

class AuthResponse(CamelModel):
    message: str
    user: UserOut
    token: str
