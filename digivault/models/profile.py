from pydantic import BaseModel, ConfigDict, Field


class Profile(BaseModel):
    """The player's profile and coin balance."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    coins: int = Field(..., ge=0)
