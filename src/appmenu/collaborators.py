"""External effects used by menu handlers, with headless implementations."""
import logging
import sys
import webbrowser

from .menu import outline

logger = logging.getLogger(__name__)


class Collaborators:
    """Bundle of the effects the menu handlers reach for."""

    def __init__(self, channel, dialogs, links, windows, quit_app=None):
        """Group the collaborators handed to the fragment builders.

        Args:
            channel: Object with ``send(event_id)``
            dialogs: Object with ``open_file()`` and ``save_file(target_event, label_hint=None)``
            links: Object with ``open(url)``
            windows: Object with ``focused_window()``
            quit_app: Zero-argument callable terminating the application
        """
        self.channel = channel
        self.dialogs = dialogs
        self.links = links
        self.windows = windows
        self.quit_app = quit_app if quit_app else _exit


def _exit():
    sys.exit(0)


class LoggingChannel:
    """Notification channel that records and logs each event."""

    def __init__(self):
        self.sent = []

    def send(self, event_id):
        self.sent.append(event_id)
        logger.info(f"Event sent: {event_id}")


class LoggingDialogs:
    """File dialogs for headless runs."""

    def __init__(self, channel):
        self.channel = channel

    def open_file(self):
        logger.info("Open dialog requested")

    def save_file(self, target_event, label_hint=None):
        """Pretend the user confirmed the save dialog.

        Args:
            target_event: Event sent once a destination is chosen
            label_hint: Optional name of what is being saved
        """
        logger.info(f"Save dialog requested for {label_hint or 'file'}")
        self.channel.send(target_event)


class BrowserLinks:
    """Opens external links in the system browser."""

    def open(self, url):
        try:
            if not webbrowser.open(url):
                logger.warning(f"No browser available to open {url}")
        except webbrowser.Error as e:
            logger.warning(f"Failed to open {url}: {e}")


class NoWindows:
    """Window accessor for runs without any window."""

    def focused_window(self):
        return None


class OutlineRenderer:
    """Rendering layer that prints the installed tree as an outline."""

    def __init__(self, stream=None):
        self.stream = stream if stream else sys.stdout
        self.tree = None

    def render(self, tree):
        self.tree = tree
        for line in outline(tree):
            print(line, file=self.stream)
