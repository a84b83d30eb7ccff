# controller/session_controller.py
from typing import Optional
from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import RedirectResponse
from config.settings import settings
from controller.controller_dependencies import get_session_service
from core import cookie_codec
from service.session_service import SessionService
from util.constants import InternalURIs

session_router = APIRouter()


@session_router.post(InternalURIs.LOGIN)
async def login(
    accountId: Optional[str] = Form(default=None),
    apiKey: Optional[str] = Form(default=None),
    service: SessionService = Depends(get_session_service),
) -> RedirectResponse:
    credentials = await service.login(accountId, apiKey)
    response = RedirectResponse(InternalURIs.INDEX, status_code=status.HTTP_302_FOUND)
    cookie_codec.issue(
        response,
        credentials,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        secure=settings.COOKIE_SECURE,
    )
    return response


# Any method clears the session.
@session_router.api_route(
    InternalURIs.LOGOUT, methods=["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD"]
)
async def logout() -> RedirectResponse:
    response = RedirectResponse(InternalURIs.INDEX, status_code=status.HTTP_302_FOUND)
    cookie_codec.expire(response, secure=settings.COOKIE_SECURE)
    return response
