"""Default menu provider: raw host templates and their conversion to nodes."""
import logging

from .errors import TemplateError
from .menu import Action, RoleAction, Separator, Submenu

logger = logging.getLogger(__name__)


def default_template(app_name, primary):
    """Host-conventional raw template, as a list of dicts.

    Args:
        app_name: Display name used for the identity menu
        primary: Whether to lead with the identity menu
    """
    template = [
        {'label': 'Edit', 'submenu': [
            {'label': 'Undo', 'role': 'undo'},
            {'label': 'Redo', 'role': 'redo'},
            {'type': 'separator'},
            {'label': 'Cut', 'role': 'cut'},
            {'label': 'Copy', 'role': 'copy'},
            {'label': 'Paste', 'role': 'paste'},
            {'label': 'Select All', 'role': 'selectall'},
        ]},
        {'label': 'View', 'submenu': [
            {'label': 'Reload', 'role': 'reload'},
            {'label': 'Toggle Full Screen', 'role': 'togglefullscreen'},
            {'label': 'Toggle Developer Tools', 'role': 'toggledevtools'},
        ]},
        {'label': 'Window', 'role': 'window', 'submenu': [
            {'label': 'Minimize', 'role': 'minimize'},
            {'label': 'Close', 'role': 'close'},
        ]},
        {'label': 'Help', 'role': 'help', 'submenu': [
            {'label': 'Learn More', 'event': 'OPEN_LEARN_MORE'},
        ]},
    ]
    if primary:
        template.insert(0, {'label': app_name, 'submenu': [
            {'label': f'About {app_name}', 'role': 'about'},
            {'type': 'separator'},
            {'label': 'Services', 'role': 'services'},
            {'type': 'separator'},
            {'label': f'Hide {app_name}', 'role': 'hide'},
            {'label': 'Hide Others', 'role': 'hideothers'},
            {'label': 'Show All', 'role': 'unhide'},
            {'type': 'separator'},
            {'label': 'Quit', 'role': 'quit'},
        ]})
    return template


def _send(channel, event_id):
    return lambda: channel.send(event_id)


def from_template(raw_items, channel):
    """Convert raw template entries into menu nodes.

    Args:
        raw_items: List of dicts in host template form
        channel: Notification channel for entries that only carry a label

    Raises:
        TemplateError: If an entry is not a dict or has no type, role or label
    """
    nodes = []
    for item in raw_items or []:
        if not isinstance(item, dict):
            raise TemplateError(f"Template entry must be a mapping, got {item!r}")
        label = item.get('label')
        if item.get('type') == 'separator':
            nodes.append(Separator())
        elif isinstance(item.get('submenu'), list):
            nodes.append(Submenu(label, from_template(item['submenu'], channel)))
        elif item.get('role'):
            nodes.append(RoleAction(item['role'], label=label))
        elif label:
            nodes.append(Action(
                label,
                _send(channel, item.get('event', label)),
                accelerator=item.get('accelerator'),
            ))
        else:
            raise TemplateError(f"Cannot interpret template entry {item!r}")
    return nodes


class TemplateProvider:
    """Default menu provider backed by a raw template."""

    def __init__(self, raw_items, channel):
        self.raw_items = raw_items
        self.channel = channel

    def get_base_tree(self):
        # Parsed on every call; builds never share nodes
        tree = from_template(self.raw_items, self.channel)
        logger.debug(f"Base template has {len(tree)} top-level menus")
        return tree
