from collections.abc import AsyncGenerator

import httpx


def response_json(response: httpx.Response) -> dict[str, object]:
    payload = response.json()
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object from {response.request.url.path}")
    return payload


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(headers={"Accept": "application/json"}) as client:
        yield client
