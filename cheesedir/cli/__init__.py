"""Command line interface."""

from cheesedir.cli.menu import MenuController, MenuOption, main, prompt_bounded_int

__all__ = ["MenuController", "MenuOption", "main", "prompt_bounded_int"]
