"""appmenu - Composes a desktop application's menu bar from the host's default template."""

from .main import MenuApp, main
from .menu import MenuNode, Action, Separator, Submenu, RoleAction, find_menu, shape
from .assembler import assemble, install, build_menu
from .errors import MenuError, EmptyBaseTreeError, TemplateError

__all__ = [
    'MenuApp', 'main', 'MenuNode', 'Action', 'Separator', 'Submenu', 'RoleAction',
    'find_menu', 'shape', 'assemble', 'install', 'build_menu',
    'MenuError', 'EmptyBaseTreeError', 'TemplateError',
]
