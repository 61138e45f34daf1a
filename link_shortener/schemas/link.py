from pydantic import BaseModel, Field
from typing import Optional


class ShortenRequest(BaseModel):
    """Body of POST /shorten
    
    url is optional at the schema level so a missing field reaches the
    route and gets the 400 error body instead of a 422.
    """
    url: Optional[str] = Field(None, description="The original URL to be shortened")


class ShortenResponse(BaseModel):
    hash: str = Field(..., description="Key of the short link")


class ErrorResponse(BaseModel):
    error: str
    code: int
