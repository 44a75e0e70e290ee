"""Operations that locate a named top-level menu and rework its children."""
import logging

from .menu import RoleAction, Separator, find_menu

logger = logging.getLogger(__name__)

PREFERENCES_INDEX = 2
ZOOM_ROLES = ('resetzoom', 'zoomin', 'zoomout')


def remove_labeled(submenu, label):
    """Drop every child labelled ``label``; return how many were removed."""
    kept = [child for child in submenu.children if child.label != label]
    removed = len(submenu.children) - len(kept)
    submenu.children = kept
    return removed


def splice(submenu, index, nodes):
    submenu.children[index:index] = list(nodes)


def append(submenu, nodes):
    submenu.children.extend(nodes)


def replace_children(submenu, nodes):
    submenu.children = list(nodes)


def _locate(tree, label):
    submenu = find_menu(tree, label)
    if submenu is None:
        logger.warning(f"Menu '{label}' not found in base template, skipping")
    return submenu


def inject_preferences(tree, app_name, items):
    """Insert the preferences items into the application's own menu.

    They land at PREFERENCES_INDEX, below "About" and above the services
    block the host adds.
    """
    submenu = _locate(tree, app_name)
    if submenu is None:
        return False
    splice(submenu, PREFERENCES_INDEX, items)
    return True


def customize_view(tree):
    """Remove the View copy of developer tools and add zoom actions."""
    submenu = _locate(tree, "View")
    if submenu is None:
        return False
    # Developer tools are reachable from Help only
    remove_labeled(submenu, "Toggle Developer Tools")
    append(submenu, [Separator()] + [RoleAction(role) for role in ZOOM_ROLES])
    return True


def replace_help(tree, items):
    submenu = _locate(tree, "Help")
    if submenu is None:
        return False
    replace_children(submenu, items)
    return True
