"""Builders for the menu pieces this application adds to the host template.

Every builder returns freshly constructed nodes, so a fragment can be
inserted into several parents and two builds never share state.
"""
from . import events
from .menu import Action, Separator, Submenu

DEFAULT_HELP_LINKS = [
    ("Open Fiddle Repository...", "https://github.com/electron/fiddle"),
    ("Open Electron Repository...", "https://github.com/electron/electron"),
    ("Open Electron Issue Tracker...", "https://github.com/electron/electron/issues"),
]


def _notify(collaborators, event_id):
    return lambda: collaborators.channel.send(event_id)


def _open_link(collaborators, url):
    return lambda: collaborators.links.open(url)


def _toggle_dev_tools(collaborators):
    def handler():
        window = collaborators.windows.focused_window()
        if window is not None and not window.is_destroyed():
            window.open_dev_tools(mode='bottom')
    return handler


def help_items(collaborators, links=None):
    """Items that make up the whole Help menu.

    Args:
        collaborators: Collaborators bundle used by the handlers
        links: Optional list of (label, url) pairs replacing DEFAULT_HELP_LINKS
    """
    items = [
        Separator(),
        Action("Show Welcome Tour", _notify(collaborators, events.SHOW_WELCOME_TOUR)),
        Separator(),
        Action(
            "Toggle Developer Tools",
            _toggle_dev_tools(collaborators),
            accelerator="CmdOrCtrl+Option+I",
        ),
        Separator(),
    ]
    for label, url in (links or DEFAULT_HELP_LINKS):
        items.append(Action(label, _open_link(collaborators, url)))
    return items


def preferences_items(collaborators):
    return [
        Separator(),
        Action("Preferences", _notify(collaborators, events.OPEN_SETTINGS), accelerator="CmdOrCtrl+,"),
        Separator(),
    ]


def quit_items(collaborators):
    # Exit bypasses the channel
    return [
        Separator(),
        Action("Exit", lambda: collaborators.quit_app(), accelerator="Ctrl+Q"),
    ]


def tasks_menu(collaborators):
    return Submenu("Tasks", [
        Action("Run", _notify(collaborators, events.TASK_RUN)),
        Action("Package", _notify(collaborators, events.TASK_PACKAGE)),
        Action("Make installers", _notify(collaborators, events.TASK_MAKE)),
    ])


def file_menu(collaborators, extra_items=None):
    """Top-level File menu.

    Args:
        collaborators: Collaborators bundle used by the handlers
        extra_items: Nodes appended after the file actions
    """
    dialogs = collaborators.dialogs
    children = [
        Action("New", _notify(collaborators, events.FS_NEW)),
        Separator(),
        Action("Open", lambda: dialogs.open_file(), accelerator="CmdOrCtrl+O"),
        Separator(),
        Action("Save", _notify(collaborators, events.FS_SAVE), accelerator="CmdOrCtrl+S"),
        Action(
            "Save as",
            lambda: dialogs.save_file(events.FS_SAVE),
            accelerator="CmdOrCtrl+Shift+S",
        ),
        Separator(),
        Action("Save to Gist", _notify(collaborators, events.FS_SAVE_GIST)),
        Action(
            "Save as Forge Project",
            lambda: dialogs.save_file(events.FS_SAVE_FORGE, "Forge Project"),
        ),
    ]
    if extra_items:
        children.extend(extra_items)
    return Submenu("File", children)
