from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from link_shortener.schemas.link import ErrorResponse
from link_shortener.services.shortener_service import ShortenerService
from link_shortener.dependencies import get_shortener_service

router = APIRouter(tags=["redirect"])


@router.get(
    "/{key}",
    response_class=RedirectResponse,
    status_code=status.HTTP_302_FOUND,
    responses={
        404: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def redirect_to_url(
    key: str,
    shortener: ShortenerService = Depends(get_shortener_service)
):
    """
    Redirect to the original URL.
    
    Unknown keys raise LinkNotFoundError, which the app turns into a 404.
    """
    url = await shortener.retrieve(key)
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
