"""
User Pydantic models
"""

from pydantic import BaseModel, ConfigDict, StrictInt


class UserPayload(BaseModel):
    """Request body for create and update. Unknown fields are dropped, missing ones default."""
    model_config = ConfigDict(extra="ignore")

    # JSON numbers only; "5", 1.0 and true are rejected
    id: StrictInt = 0
    name: str = ""
    email: str = ""


class User(BaseModel):
    id: int
    name: str
    email: str
