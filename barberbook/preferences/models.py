from typing import Literal, get_args

from pydantic import BaseModel

Theme = Literal["light", "dark"]
THEMES: tuple[str, ...] = get_args(Theme)


def toggled(theme: Theme) -> Theme:
    return "light" if theme == "dark" else "dark"


class ThemeRead(BaseModel):
    """Response schema for the theme preference."""

    theme: Theme
