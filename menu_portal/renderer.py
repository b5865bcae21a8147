"""Builds the menu and backfills it as generations come back."""

import asyncio
import logging
from typing import Any, Coroutine, Iterable

from menu_portal.domain.generation import GenerationClient, GenerationError, InitFailure
from menu_portal.domain.models import Card, MenuEntry
from menu_portal.html.menu_card import Part
from menu_portal.html.portal import Portal


logger = logging.getLogger(__name__)


# Generations outlive the connection that asked for them.
RUNNING: set[asyncio.Task[None]] = set()


class MenuRenderer:
    def __init__(
        self,
        catalog: Iterable[MenuEntry],
        client: GenerationClient | InitFailure,
    ) -> None:
        self.catalog = tuple(catalog)
        self.client = client

    def render_menu(self, portal: Portal | None) -> list[asyncio.Task[None]]:
        """Replace whatever the portal shows with one card per catalog entry.

        Cards are appended straight away. The description and image of every
        card are requested concurrently, and each task patches only its own
        card when it finishes. Returns the launched tasks; nothing has to
        wait for them.
        """
        if portal is None:
            logger.warning("No mount point to render the menu into.")
            return []

        portal.clear()

        if isinstance(self.client, InitFailure):
            portal.show_error(self.client.message)
            return []

        launched: list[asyncio.Task[None]] = []
        for entry in self.catalog:
            card = Card(entry)
            portal.append(card)
            launched.append(self._launch(self.describe(card, portal, self.client)))
            launched.append(self._launch(self.illustrate(card, portal, self.client)))

        logger.info("Rendered %d cards into #%s.", len(self.catalog), portal.id)
        return launched

    def _launch(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.create_task(coro)
        RUNNING.add(task)
        task.add_done_callback(RUNNING.discard)
        return task

    @staticmethod
    async def describe(card: Card, portal: Portal, client: GenerationClient) -> None:
        card.show_description(await client.describe(card.name))
        portal.refresh(card, Part.description)

    @staticmethod
    async def illustrate(card: Card, portal: Portal, client: GenerationClient) -> None:
        try:
            image = await client.illustrate(card.name)
        except GenerationError:
            card.fail_image()
        else:
            card.show_image(image)
        portal.refresh(card, Part.image)
