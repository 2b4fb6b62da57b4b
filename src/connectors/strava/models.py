from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """OAuth token payload returned by the Strava token endpoint"""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field("", description="Bearer token for API calls")
    refresh_token: Optional[str] = Field(None, description="Rotated refresh token")
    expires_at: Optional[int] = Field(None, description="Expiry as epoch seconds")
    token_type: Optional[str] = Field(None, description="Token type, usually Bearer")
