from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

import httpx

from labinventory.api_client import response_json
from labinventory.errors import InventoryFetchError, LabClientError, LoginFailedError, MissingTokenError
from labinventory.schemas import (
    DashboardLoginRequest,
    DashboardSummary,
    InventoryItem,
    InventoryListResponse,
    InventoryRow,
)
from labinventory.services.inventory import build_row, summarize

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading inventory..."
CONSOLE_HINT = "Check the browser console (F12) for details"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


@dataclass(frozen=True)
class DashboardView:
    state: Literal["loading", "error", "ready"]
    message: str | None = None
    hint: str | None = None
    summary: DashboardSummary | None = None
    rows: list[InventoryRow] = field(default_factory=list)


class DashboardScreen:
    """Authenticates on its own and renders the inventory table."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str, email: str) -> None:
        self.http_client = http_client
        self.base_url = base_url
        self.email = email
        self.items: list[InventoryItem] = []
        self.loading = True
        self.error: str | None = None
        self._loaded = False

    async def load(self) -> None:
        if self._loaded:
            return
        self._loaded = True

        try:
            token = await self._authenticate()
            self.items = await self._fetch_inventory(token)
        except (LabClientError, httpx.HTTPError, ValueError) as exc:
            self.items = []
            self.error = str(exc) or UNKNOWN_ERROR_MESSAGE
            logger.error("Dashboard error: %s", self.error)
        finally:
            self.loading = False

    async def _authenticate(self) -> str:
        response = await self.http_client.post(
            f"{self.base_url}/api/auth/login",
            json=DashboardLoginRequest(email=self.email).model_dump(),
        )
        if not response.is_success:
            raise LoginFailedError()

        token = response_json(response).get("access_token")
        if not token:
            raise MissingTokenError()
        return str(token)

    async def _fetch_inventory(self, token: str) -> list[InventoryItem]:
        response = await self.http_client.get(
            f"{self.base_url}/api/inventory",
            headers={"Authorization": f"Bearer {token}"},
        )
        if not response.is_success:
            raise InventoryFetchError(response.status_code)

        data = response_json(response)
        if data.get("items") is None:
            return []
        return InventoryListResponse.model_validate(data).items

    def render(self) -> DashboardView:
        if self.loading:
            return DashboardView(state="loading", message=LOADING_MESSAGE)
        if self.error:
            return DashboardView(state="error", message=self.error, hint=CONSOLE_HINT)
        return DashboardView(
            state="ready",
            summary=summarize(self.items),
            rows=[build_row(item) for item in self.items],
        )
