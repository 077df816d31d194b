from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from labinventory.api_client import response_json
from labinventory.schemas import LabUser, LoginRequest, LoginResponse
from labinventory.storage import LAB_USER_KEY, TOKEN_KEY, USER_KEY, ClientStorage

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/dashboard"
CONNECT_FAILED_MESSAGE = "Failed to connect to server"
UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from server"


def login_error_message(data: object) -> str:
    if isinstance(data, dict):
        return str(data.get("error") or data.get("message") or "Login failed")
    return "Login failed"


class LoginScreen:
    """Credential form that stores the session token and hands off to the dashboard."""

    def __init__(self, storage: ClientStorage, http_client: httpx.AsyncClient, base_url: str) -> None:
        self.storage = storage
        self.http_client = http_client
        self.base_url = base_url
        self.error = ""
        self.loading = False
        self.redirect_to: str | None = None

    def mount(self) -> bool:
        """Skip the form when a token is already stored. The token is not validated."""
        if self.storage.get_item(TOKEN_KEY):
            self.redirect_to = DASHBOARD_PATH
            return True
        return False

    async def submit(self, email: str, password: str) -> bool:
        self.error = ""
        self.loading = True
        try:
            payload = LoginRequest(email=email, password=password)
            response = await self.http_client.post(
                f"{self.base_url}/api/auth/login",
                json=payload.model_dump(),
            )
            data = response.json()
            if not response.is_success:
                self.error = login_error_message(data)
                logger.warning("Login rejected for %s with status %s", email, response.status_code)
                return False

            session = LoginResponse.model_validate(response_json(response))
            await run_in_threadpool(self._store_session, session, data["user"])
            logger.info("Logged in as %s (%s)", session.user.name, session.user.role)
            self.redirect_to = DASHBOARD_PATH
            return True
        except ValidationError as exc:
            self.error = UNEXPECTED_RESPONSE_MESSAGE
            logger.warning("Login response did not match the expected shape: %s", exc)
            return False
        except (httpx.HTTPError, ValueError) as exc:
            self.error = str(exc) or CONNECT_FAILED_MESSAGE
            logger.warning("Login request failed: %s", self.error)
            return False
        finally:
            self.loading = False

    def _store_session(self, session: LoginResponse, raw_user: object) -> None:
        self.storage.set_item(TOKEN_KEY, session.token)
        self.storage.set_json(USER_KEY, raw_user)
        lab_user = LabUser(name=session.user.name, role=session.user.role)
        self.storage.set_json(LAB_USER_KEY, lab_user.model_dump())
