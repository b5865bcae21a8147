import asyncio
import base64
import binascii
import logging
import sys

import httpx

from menu_portal.config import Config
from menu_portal.domain.gemini import GeminiClient, GeminiError, Modality
from menu_portal.domain.models import FALLBACK_DESCRIPTION
from menu_portal.domain.prompts import DescriptionPrompt, ImagePrompt


logger = logging.getLogger(__name__)


INIT_FAILURE_MESSAGE = "Could not connect to the AI service. Please check your API key."


class GenerationError(Exception):
    pass


class ClientNotInitialised(GenerationError):
    pass


class ServiceError(GenerationError):
    pass


class NoImageData(GenerationError):
    pass


class InitFailure:
    """Why the generation client could not be built."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause

    def __repr__(self) -> str:
        return f"<InitFailure(message={self.message!r}, cause={self.cause!r})>"


class GenerationClient:
    def __init__(
        self,
        gemini: GeminiClient,
        *,
        text_model: str = "gemini-2.5-flash",
        image_model: str = "gemini-2.5-flash-image-preview",
    ) -> None:
        self.gemini = gemini
        self.text_model = text_model
        self.image_model = image_model

    async def describe(self, name: str) -> str:
        """A short description of the dish, or the fallback. Never raises."""
        try:
            if not self.gemini.token:
                raise ClientNotInitialised("No API key.")
            text = await self.gemini.generate_text(
                self.text_model, str(DescriptionPrompt(name))
            )
        except (httpx.HTTPError, GeminiError, GenerationError) as e:
            logger.error("Error generating description for %s: %r", name, e)
            return FALLBACK_DESCRIPTION

        if not text.strip():
            logger.error("Error generating description for %s: empty response", name)
            return FALLBACK_DESCRIPTION

        logger.debug("Described %s.", name)
        return text

    async def illustrate(self, name: str) -> bytes:
        """Image bytes from the first inline image part of the response."""
        if not self.gemini.token:
            logger.error("Cannot generate image for %s: client not initialised", name)
            raise ClientNotInitialised("No API key.")

        try:
            parts = await self.gemini.generate_content(
                self.image_model,
                str(ImagePrompt(name)),
                modalities=[Modality.IMAGE, Modality.TEXT],
            )
        except (httpx.HTTPError, GeminiError) as e:
            logger.error("Error generating image for %s: %r", name, e)
            raise ServiceError(f"Image request for {name} failed.") from e

        for part in parts:
            inline_data = part.get("inlineData")
            if not inline_data:
                continue
            try:
                image = base64.b64decode(inline_data["data"], validate=True)
            except (KeyError, TypeError, binascii.Error) as e:
                logger.error("Error decoding image for %s: %r", name, e)
                raise ServiceError(f"Unreadable image data for {name}.") from e
            logger.debug("Illustrated %s (%d bytes).", name, len(image))
            return image

        logger.error("Error generating image for %s: no image data returned", name)
        raise NoImageData(f"No image data was returned for {name}.")

    async def close(self) -> None:
        await self.gemini.close()


def connect(
    config: Config,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> GenerationClient | InitFailure:
    if not (config.api_key and config.api_key.strip()):
        logger.error("Failed to initialise the generation client: API_KEY is not set")
        return InitFailure(INIT_FAILURE_MESSAGE)

    try:
        gemini = GeminiClient(
            token=config.api_key.strip(),
            base_url=config.gemini_url,
            timeout=config.timeout,
            http_client=http_client,
        )
    except (httpx.InvalidURL, ValueError) as e:
        logger.error("Failed to initialise the generation client: %r", e)
        return InitFailure(INIT_FAILURE_MESSAGE, cause=e)

    return GenerationClient(
        gemini,
        text_model=config.text_model,
        image_model=config.image_model,
    )


async def main(name: str) -> None:
    client = connect(Config())
    if isinstance(client, InitFailure):
        print(client.message)
        return
    print(await client.describe(name))
    await client.close()


if __name__ == "__main__":
    from rich import print

    from menu_portal.config import configure_logging

    configure_logging()
    asyncio.run(main(" ".join(sys.argv[1:]) or "Artisan Cheese Board"))
