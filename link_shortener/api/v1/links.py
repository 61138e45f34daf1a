import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from link_shortener.schemas.link import ShortenRequest, ShortenResponse, ErrorResponse
from link_shortener.services.shortener_service import ShortenerService
from link_shortener.dependencies import get_shortener_service
from link_shortener.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["links"])

MISSING_URL_MESSAGE = (
    "No url provided. Please provide in the body. "
    "E.g. {'url':'https://google.com'}"
)


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def shorten(
    body: Optional[ShortenRequest] = None,
    shortener: ShortenerService = Depends(get_shortener_service)
):
    """Create a short link for the URL in the request body"""
    url = body.url if body is not None else None
    if not url or not url.strip():
        raise InvalidInputError(MISSING_URL_MESSAGE)

    key = await shortener.shorten(url)
    logger.info("Shortened %s -> %s", url, key)
    return ShortenResponse(hash=key)
