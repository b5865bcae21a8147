import base64
from enum import Enum
from typing import NamedTuple


DESCRIPTION_PLACEHOLDER = "Generating description..."
FALLBACK_DESCRIPTION = "A delightful choice for any occasion."


class MenuEntry(NamedTuple):
    id: int
    name: str


class DescriptionStatus(Enum):
    pending = "pending"
    resolved = "resolved"
    fallback = "fallback"


class ImageStatus(Enum):
    pending = "pending"
    resolved = "resolved"
    failed = "failed"


class Card:
    """What one dish currently shows.

    The description and the image move independently and exactly once, out
    of `pending` into a final state. A second move is a bug in the caller.
    """

    def __init__(self, entry: MenuEntry) -> None:
        self.entry = entry
        self.description = DESCRIPTION_PLACEHOLDER
        self.description_status = DescriptionStatus.pending
        self.image: bytes | None = None
        self.image_status = ImageStatus.pending

    def __repr__(self) -> str:
        return (
            f"<Card(id={self.entry.id}, name={self.entry.name}, "
            f"description={self.description_status.value}, "
            f"image={self.image_status.value})>"
        )

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def dom_id(self) -> str:
        return f"food-card-{self.entry.id}"

    @property
    def label(self) -> str:
        return f"Menu item: {self.name}"

    @property
    def description_loading(self) -> bool:
        return self.description_status is DescriptionStatus.pending

    @property
    def image_loading(self) -> bool:
        return self.image_status is ImageStatus.pending

    @property
    def image_alt(self) -> str:
        if self.image_status is ImageStatus.failed:
            return f"Error loading image for {self.name}"
        return self.name

    @property
    def image_src(self) -> str | None:
        if self.image is None:
            return None
        return f"data:image/png;base64,{base64.b64encode(self.image).decode('utf-8')}"

    def show_description(self, text: str) -> None:
        if not self.description_loading:
            raise ValueError(f"Description for {self.name} already shown.")
        self.description = text
        self.description_status = (
            DescriptionStatus.fallback
            if text == FALLBACK_DESCRIPTION
            else DescriptionStatus.resolved
        )

    def show_image(self, image: bytes) -> None:
        if not self.image_loading:
            raise ValueError(f"Image for {self.name} already shown.")
        self.image = image
        self.image_status = ImageStatus.resolved

    def fail_image(self) -> None:
        if not self.image_loading:
            raise ValueError(f"Image for {self.name} already shown.")
        self.image_status = ImageStatus.failed
