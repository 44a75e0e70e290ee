"""Turns the host's default menu template into the application menu bar."""
import logging

from . import platform_policy
from .errors import EmptyBaseTreeError
from .fragments import file_menu, help_items, preferences_items, tasks_menu
from .transformers import customize_view, inject_preferences, replace_help

logger = logging.getLogger(__name__)


def assemble(base_tree, app_name, collaborators, primary=None, help_links=None):
    """Compose the final menu tree.

    Args:
        base_tree: Top-level nodes from the default menu provider
        app_name: Display name labelling the identity menu
        collaborators: Collaborators bundle used by the added actions
        primary: Whether the primary-platform layout applies; None detects the host
        help_links: Optional (label, url) pairs for the Help menu

    Returns:
        A new list of top-level nodes. Submenus of ``base_tree`` are
        reworked in place.

    Raises:
        EmptyBaseTreeError: If ``base_tree`` is None or empty
    """
    if not base_tree:
        raise EmptyBaseTreeError("Default menu provider returned no menus")
    if primary is None:
        primary = platform_policy.is_primary_platform()

    tree = list(base_tree)
    if primary:
        inject_preferences(tree, app_name, preferences_items(collaborators))
    customize_view(tree)
    replace_help(tree, help_items(collaborators, help_links))

    extras = platform_policy.file_menu_extras(collaborators, primary)
    tree.insert(platform_policy.file_menu_index(primary), file_menu(collaborators, extras))

    # The host's last menu is Help-like and stays last
    tree.insert(len(tree) - 1, tasks_menu(collaborators))

    logger.debug(f"Assembled menu: {[node.label for node in tree]}")
    return tree


def install(tree, renderer):
    """Hand a finished tree over to the rendering layer."""
    renderer.render(tree)
    return tree


def build_menu(provider, app_name, collaborators, renderer, primary=None, help_links=None):
    """Fetch the base tree, compose it and install the result."""
    base_tree = provider.get_base_tree()
    tree = assemble(base_tree, app_name, collaborators, primary=primary, help_links=help_links)
    return install(tree, renderer)
