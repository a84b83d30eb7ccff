# core/cookie_codec.py
"""
Session cookies: the credential pair travels as two independent cookies,
`accountId` and `apiKey`. Nothing is kept server side.

Parsing is deliberately forgiving (split on ';', then on the first '=', drop
anything else). The login probe is what validates the credentials, not this.
"""
from typing import Mapping, Optional
from fastapi import Response
from starlette.requests import cookie_parser
from model.session import CookieCredentials, Credentials
from util.constants import CookieNames

_COOKIE_NAMES = (CookieNames.ACCOUNT_ID, CookieNames.API_KEY)


def _set(
    response: Response,
    name: str,
    value: str,
    *,
    max_age: Optional[int],
    secure: bool,
) -> None:
    response.set_cookie(
        name,
        value,
        max_age=max_age,
        path="/",
        secure=secure,
        httponly=True,
        samesite="strict",
    )


def issue(
    response: Response,
    credentials: Credentials,
    *,
    max_age: Optional[int] = None,
    secure: bool = False,
) -> None:
    """Append the two session Set-Cookie headers. `max_age` of 0/None = browser session."""
    lifetime = max_age if max_age else None
    _set(response, CookieNames.ACCOUNT_ID, credentials.account_id, max_age=lifetime, secure=secure)
    _set(response, CookieNames.API_KEY, credentials.api_key, max_age=lifetime, secure=secure)


def expire(response: Response, *, secure: bool = False) -> None:
    """Append two empty, immediately-expiring session cookies."""
    for name in _COOKIE_NAMES:
        _set(response, name, "", max_age=0, secure=secure)


def decode(headers: Mapping[str, str]) -> CookieCredentials:
    raw = headers.get("cookie") or headers.get("Cookie")
    if not raw:
        return CookieCredentials()
    cookies = cookie_parser(raw)
    return CookieCredentials(
        account_id=cookies.get(CookieNames.ACCOUNT_ID) or None,
        api_key=cookies.get(CookieNames.API_KEY) or None,
    )
