"""The mount point the menu is rendered into.

The browser holds the real DOM. A `Portal` keeps the server's view of it and
pushes every change as an htmx out-of-band fragment through `publish`.
"""

import logging
from typing import Callable

from jinja2 import Environment

from menu_portal.domain.models import Card
from menu_portal.html.menu_card import MenuCard, Part


logger = logging.getLogger(__name__)


class Portal:
    def __init__(
        self,
        id: str,
        *,
        environment: Environment,
        publish: Callable[[str], None],
    ) -> None:
        self.id = id
        self.env = environment
        self.publish = publish
        self.cards: list[Card] = []
        self.error: str | None = None

    def __repr__(self) -> str:
        return f"<Portal(id={self.id}, cards={len(self.cards)})>"

    def _render(self, template_name: str, **context: object) -> str:
        return self.env.get_template(template_name).render(portal=self, **context)

    def clear(self) -> None:
        self.cards = []
        self.error = None
        self.publish(self._render("portal-clear.html"))

    def append(self, card: Card) -> None:
        self.cards.append(card)
        html = MenuCard(card, environment=self.env).render()
        self.publish(self._render("portal-append.html", content=html))

    def show_error(self, message: str) -> None:
        self.cards = []
        self.error = message
        self.publish(self._render("portal-error.html", message=message))

    def refresh(self, card: Card, part: Part) -> None:
        # Cards from an earlier render are no longer on the page.
        if not any(c is card for c in self.cards):
            logger.debug("Dropping %s update for detached %r.", part.value, card)
            return
        self.publish(MenuCard(card, environment=self.env).render_part(part, oob=True))
