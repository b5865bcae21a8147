DESCRIPTION_WORD_LIMIT = 25

DESCRIPTION_PROMPT = (
    'Create a short, elegant, and appetizing description for a dish named "{name}" '
    "for a high-end catering website. Keep it under {word_limit} words."
)

IMAGE_PROMPT = (
    "Generate a professional, appetizing photo of {name}, beautifully plated for "
    "a high-end catering event. Centered, on a clean, minimalist background."
)


class DescriptionPrompt:
    def __init__(self, name: str, *, word_limit: int = DESCRIPTION_WORD_LIMIT) -> None:
        self.name = name
        self.word_limit = word_limit

    def __str__(self) -> str:
        return DESCRIPTION_PROMPT.format(name=self.name, word_limit=self.word_limit)


class ImagePrompt:
    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return IMAGE_PROMPT.format(name=self.name)
