from pathlib import Path
from typing import Callable

import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape
import pytest

from gemini_fakes import IMAGE_MODEL, TEXT_MODEL, FakeGemini
from menu_portal.domain.gemini import BASE_URL, GeminiClient
from menu_portal.domain.generation import GenerationClient
from menu_portal.html.portal import Portal


HTML_DIR = Path(__file__).parent.parent / "assets" / "html"


Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_client() -> Callable[..., GenerationClient]:
    def make(handler: Handler, token: str | None = "test-key") -> GenerationClient:
        http_client = httpx.AsyncClient(
            base_url=BASE_URL, transport=httpx.MockTransport(handler)
        )
        gemini = GeminiClient(token=token, http_client=http_client)
        return GenerationClient(gemini, text_model=TEXT_MODEL, image_model=IMAGE_MODEL)

    return make


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def generation_client(
    make_client: Callable[..., GenerationClient], fake_gemini: FakeGemini
) -> GenerationClient:
    return make_client(fake_gemini)


@pytest.fixture
def environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(HTML_DIR),
        autoescape=select_autoescape(),
    )


@pytest.fixture
def fragments() -> list[str]:
    return []


@pytest.fixture
def portal(environment: Environment, fragments: list[str]) -> Portal:
    return Portal("menu-portal", environment=environment, publish=fragments.append)
