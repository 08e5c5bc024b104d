from pydantic import BaseModel, Field

class LoginIn(BaseModel):
    username: str = Field(max_length=120)
    password: str = Field(max_length=256)

class SessionOut(BaseModel):
    logged_in: bool
    user_id: int | None = None
    username: str | None = None
    role: str | None = None

class LoginOut(BaseModel):
    message: str
    user_id: int
    username: str
    role: str
    dashboard: str
