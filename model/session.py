# model/session.py
from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Account id + API token pair. Carried only in the session cookies."""

    model_config = ConfigDict(frozen=True)

    account_id: str = Field(min_length=1)
    api_key: str = Field(min_length=1, repr=False)


class CookieCredentials(BaseModel):
    """Whatever the Cookie header held; either half may be missing."""

    model_config = ConfigDict(frozen=True)

    account_id: str | None = None
    api_key: str | None = Field(default=None, repr=False)

    def complete(self) -> Credentials | None:
        if not self.account_id or not self.api_key:
            return None
        return Credentials(account_id=self.account_id, api_key=self.api_key)
