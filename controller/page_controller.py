# controller/page_controller.py
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from core import cookie_codec
from core.pages import dashboard_page, login_page

page_router = APIRouter()


# Registered last: catches every GET path no other router claimed.
@page_router.get("/{path:path}", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request, path: str) -> HTMLResponse:
    if cookie_codec.decode(request.headers).complete() is None:
        return HTMLResponse(login_page())
    return HTMLResponse(dashboard_page())
