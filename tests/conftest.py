from typing import Any

import httpx
import pytest


@pytest.fixture
def fake_contributions_api(monkeypatch: pytest.MonkeyPatch):
    """Serve a canned contributions payload instead of calling the network.

    Returns an installer; the list it returns records every requested URL.
    """

    def install(
        payload: Any = None, status_code: int = 200, content: bytes | None = None
    ) -> list[str]:
        calls: list[str] = []

        def fake_get(
            url: str, headers: dict[str, str], timeout: float
        ) -> httpx.Response:
            calls.append(url)
            request = httpx.Request("GET", url, headers=headers)
            if content is not None:
                return httpx.Response(status_code, content=content, request=request)
            return httpx.Response(status_code, json=payload, request=request)

        monkeypatch.setattr(
            "contribution_image.clients.contributions_client.httpx.get", fake_get
        )
        return calls

    return install
