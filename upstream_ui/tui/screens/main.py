"""Main menu screen — root of the navigation."""
from __future__ import annotations

from typing import TYPE_CHECKING

import questionary

from ..components import BRAND_STYLE, menu_choices, render_header, render_welcome_banner
from ..menu import MAIN_MENU
from ..router import Router, register_screen

if TYPE_CHECKING:
    from ...view import View


@register_screen("main_menu")
def show_main_menu(router: Router, view: View) -> str | None:
    """Display the main menu built from the menu descriptors."""
    router.console.clear()
    render_welcome_banner(router.console)
    render_header(router.console, router.settings)

    choices = [
        *menu_choices(MAIN_MENU),
        questionary.Separator(""),
        questionary.Choice("Exit", value="exit"),
    ]

    choice = questionary.select(
        "Where to?",
        choices=choices,
        style=BRAND_STYLE,
        use_shortcuts=True,
    ).ask()

    if choice is None or choice == "exit":
        return "exit"

    return choice
