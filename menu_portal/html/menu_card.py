from enum import Enum

from jinja2 import Environment

from menu_portal.domain.models import Card


class Part(Enum):
    description = "description"
    image = "image"


class MenuCard:
    def __init__(
        self,
        card: Card,
        *,
        environment: Environment,
        template_name: str = "menu-card.html",
    ) -> None:
        self.card = card
        self.env = environment
        self.name = template_name

    @property
    def description_id(self) -> str:
        return f"{self.card.dom_id}-description"

    @property
    def image_id(self) -> str:
        return f"{self.card.dom_id}-image"

    def render(self) -> str:
        return self.env.get_template(self.name).render(card=self.card, view=self)

    def render_part(self, part: Part, *, oob: bool = False) -> str:
        return self.env.get_template(f"card-{part.value}.html").render(
            card=self.card,
            view=self,
            oob=oob,
        )
