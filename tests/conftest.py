"""Shared test fixtures and configuration."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from sample_galleries.config.settings import Settings
from sample_galleries.gateway.gateway import SamplesGateway

SAMPLES_URL = "https://samples.example.com/api/search"


class FakeSamplesApi:
    """In-process stand-in for the samples search API, served through ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: str = json.dumps({"items": [], "total": 0})
        self.error: Exception | None = None

    def respond_with(self, payload: Any, status_code: int = 200) -> None:
        self.body = json.dumps(payload)
        self.status_code = status_code

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status_code,
            content=self.body.encode(),
            headers={"Content-Type": "application/json"},
        )

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        samples_api={"base_url": SAMPLES_URL},
    )


@pytest.fixture
def samples_url() -> str:
    return SAMPLES_URL


@pytest.fixture
def samples_api() -> FakeSamplesApi:
    return FakeSamplesApi()


@pytest.fixture
def gateway(samples_api: FakeSamplesApi) -> SamplesGateway:
    """Gateway wired to the fake API; the configured URL carries a trailing slash."""
    return SamplesGateway(f"{SAMPLES_URL}/", client=samples_api.client())


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """A realistic sample record as returned by the samples API."""
    return {
        "sampleId": "pnp-sp-dev-spfx-react-hooks",
        "name": "react-hooks",
        "version": "1.0.0",
        "source": "github",
        "title": "React Hooks in SPFx",
        "shortDescription": "Using React hooks in SharePoint Framework web parts.",
        "downloadUrl": "https://example.com/download/react-hooks.zip",
        "url": "https://example.com/samples/react-hooks",
        "trackingImage": "https://example.com/t.png",
        "products": ["spfx", "sharepoint"],
        "categories": ["react"],
        "authors": [
            {
                "gitHubAccount": "octocat",
                "displayName": "Octo Cat",
                "company": "Contoso",
                "pictureUrl": "https://example.com/octocat.png",
            },
        ],
        "metadata": [{"key": "CLIENT-SIDE-DEV", "value": "react"}],
        "thumbnails": [
            {"type": "image", "sortOrder": 1, "url": "assets/preview.png", "alt": "Preview"},
            {
                "type": "slideshow",
                "sortOrder": 2,
                "slides": [{"order": 1, "url": "assets/slide1.png", "alt": "Slide 1"}],
            },
        ],
        "references": [
            {"name": "Docs", "url": "https://learn.example.com/spfx", "description": "SPFx docs"},
        ],
        "creationDateTime": "2024-03-10T08:30:00+00:00",
        "updateDateTime": "2024-05-01T12:00:00+00:00",
        "featured": True,
        "preview": {"label": "Try it", "url": "https://example.com/preview", "settings": {"theme": "dark"}},
        "unknownField": "ignored",
    }
