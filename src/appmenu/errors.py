"""Exceptions raised while composing the menu bar."""


class MenuError(Exception):
    """Base class for menu composition errors."""


class EmptyBaseTreeError(MenuError):
    """The default menu provider returned no top-level entries."""


class TemplateError(MenuError):
    """A raw template entry could not be turned into a menu node."""
