"""Session token DTOs."""

from pydantic import BaseModel, Field


class IssuedToken(BaseModel):
    """A freshly signed session token."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int = Field(..., gt=0, description="Lifetime in seconds")

    model_config = {"frozen": True}


class TokenClaims(BaseModel):
    """Verified claims of a session token."""

    sub: str = Field(..., description="User id as a decimal string")
    email: str
    roles: list[str] = Field(default_factory=list)
    iat: int
    exp: int

    model_config = {"frozen": True}

    def has_any_role(self, *names: str) -> bool:
        return any(name in self.roles for name in names)
