import io
import logging
from typing import Callable, List

import httpx
import pytest
import structlog
from PIL import Image

from bingbackground.core.config import Settings, reset_settings

SERVICE_URL = "https://bing.test"
URLBASE = "/th?id=OHR.Example_EN-US1234567890"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch) -> None:
    """Keep the global settings, logging setup and environment out of each test."""
    for name in ("SERVICE_URL", "COUNTRY_CODE", "FORCE_RESOLUTION", "PICTURES_DIR", "POSITION"):
        monkeypatch.delenv(f"BINGBACKGROUND_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        service_url=SERVICE_URL,
        pictures_dir=tmp_path / "Pictures",
        force_resolution="1920x1080",
    )


@pytest.fixture
def jpeg_bytes() -> bytes:
    output = io.BytesIO()
    Image.new("RGB", (8, 6), "navy").save(output, format="JPEG")
    return output.getvalue()


def archive_json(urlbase: str = URLBASE, copyright: str = "Example Place (© Example Corp)") -> dict:
    return {
        "images": [
            {
                "startdate": "20261017",
                "url": urlbase + "_1920x1080.jpg&rf=LaDigue_1920x1080.jpg",
                "urlbase": urlbase,
                "copyright": copyright,
                "title": "Example",
            }
        ]
    }


class FakeBing:
    """Programmable stand-in for the service, recording every request."""

    def __init__(self, image: bytes = b"", head_status: int = 200, archive=None):
        self.image = image
        self.head_status = head_status
        self.archive = archive if archive is not None else archive_json()
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "HEAD":
            return httpx.Response(self.head_status)
        if request.url.path == "/HPImageArchive.aspx":
            return httpx.Response(200, json=self.archive)
        if request.url.path == "/th":
            return httpx.Response(200, content=self.image)
        return httpx.Response(200, text="<html></html>")

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self), follow_redirects=True)

    def urls(self, method: str = "GET") -> List[str]:
        return [str(r.url) for r in self.requests if r.method == method]


@pytest.fixture
def fake_bing(jpeg_bytes) -> FakeBing:
    return FakeBing(image=jpeg_bytes)


def failing_transport(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Name or service not known", request=request)


@pytest.fixture
def offline_client() -> Callable[..., httpx.Client]:
    return lambda *args, **kwargs: httpx.Client(transport=httpx.MockTransport(failing_transport))


@pytest.fixture
def make_bing(jpeg_bytes) -> Callable[..., FakeBing]:
    """Factory for FakeBing services; archive may be any JSON value."""
    def factory(head_status: int = 200, copyright: str = "Example Place (© Example Corp)", **kwargs) -> FakeBing:
        kwargs.setdefault("archive", archive_json(copyright=copyright))
        return FakeBing(image=jpeg_bytes, head_status=head_status, **kwargs)
    return factory
