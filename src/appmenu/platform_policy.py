"""Where the platform-dependent menu items go."""
import platform

from .fragments import preferences_items, quit_items

PRIMARY_SYSTEMS = ('darwin', 'macos')


def is_primary_platform(system=None):
    """Whether application-level items live in an app-identity menu.

    Args:
        system: Platform name such as 'Darwin', 'linux' or 'win32';
            defaults to the running host
    """
    if system is None:
        system = platform.system()
    return system.lower() in PRIMARY_SYSTEMS


def file_menu_extras(collaborators, primary):
    """Items appended to the end of File; empty on the primary platform."""
    if primary:
        return []
    return preferences_items(collaborators) + quit_items(collaborators)


def file_menu_index(primary):
    # File follows the identity menu on the primary platform
    return 1 if primary else 0
