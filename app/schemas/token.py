from pydantic import ConfigDict

from app.schemas.common import CamelModel


class TokenPair(CamelModel):
    access_token: str
    refresh_token: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "accessToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "refreshToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."
            }
        }
    )
