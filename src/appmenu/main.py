import sys
import yaml
import argparse
import logging
from pathlib import Path

# Local imports
from .assembler import build_menu
from .collaborators import (
    BrowserLinks, Collaborators, LoggingChannel, LoggingDialogs, NoWindows, OutlineRenderer,
)
from .errors import MenuError
from .menu import Action, find_menu
from .platform_policy import is_primary_platform
from .template import TemplateProvider, default_template

# Setup Logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = 'Fiddle'


class MenuApp:
    def __init__(self, config_path, platform_name=None, renderer=None, collaborators=None):
        self.config = self._load_config(config_path)
        self._check_config(self.config)

        app_conf = self.config.get('app') or {}
        self.app_name = app_conf.get('name', DEFAULT_APP_NAME)
        self.primary = is_primary_platform(platform_name or self.config.get('platform'))
        self.help_links = self._parse_links(self.config.get('help_links'))

        # Collaborators
        if collaborators is None:
            channel = LoggingChannel()
            collaborators = Collaborators(
                channel=channel,
                dialogs=LoggingDialogs(channel),
                links=BrowserLinks(),
                windows=NoWindows(),
            )
        self.collaborators = collaborators
        self.renderer = renderer if renderer else OutlineRenderer()

        raw_template = self.config.get('template')
        if raw_template is None:
            raw_template = default_template(self.app_name, self.primary)
        self.provider = TemplateProvider(raw_template, collaborators.channel)

        self.tree = None

    def _load_config(self, path):
        try:
            with open(path, 'r') as f:
                return yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Config {path} not found, using defaults")
            return {}
        except Exception as e:
            logger.error(f"Failed to load config: {e}")
            sys.exit(1)

    def _check_config(self, config):
        """Exit on a config whose shape cannot be used."""
        problem = None
        if not isinstance(config, dict):
            problem = "top level must be a mapping"
        elif not isinstance(config.get('app') or {}, dict):
            problem = "'app' must be a mapping"
        elif config.get('platform') is not None and not isinstance(config['platform'], str):
            problem = "'platform' must be a string"
        elif not isinstance(config.get('help_links') or [], list):
            problem = "'help_links' must be a list"
        if problem:
            logger.error(f"Invalid config: {problem}")
            sys.exit(1)

    def _parse_links(self, raw_links):
        if not raw_links:
            return None
        links = []
        for link in raw_links:
            if not isinstance(link, dict) or not link.get('url'):
                logger.error(f"Invalid config: help link {link!r} has no url")
                sys.exit(1)
            links.append((link.get('label', link['url']), link['url']))
        return links

    def build(self):
        """Compose the menu from a fresh base template and install it."""
        self.tree = build_menu(
            self.provider,
            self.app_name,
            self.collaborators,
            self.renderer,
            primary=self.primary,
            help_links=self.help_links,
        )
        return self.tree

    def select(self, path):
        """Activate the action at a slash-separated label path, e.g. 'File/Save'.

        Returns:
            True if an action was found and activated
        """
        labels = path.split('/')
        node = find_menu(self.tree or [], labels[0])
        for label in labels[1:]:
            if node is None or not node.is_submenu:
                node = None
                break
            node = next((child for child in node.children if child.label == label), None)
        if not isinstance(node, Action):
            logger.warning(f"No action at '{path}'")
            return False
        node.activate()
        return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compose the application menu bar")
    parser.add_argument("--config", default="config.yaml", help="Path to config file")
    parser.add_argument("--platform", choices=['darwin', 'linux', 'win32'], help="Platform layout to use")
    parser.add_argument("--select", metavar="PATH", help="Activate an action after install, e.g. 'File/Save'")
    args = parser.parse_args(argv)

    app = MenuApp(Path(args.config), platform_name=args.platform)
    try:
        app.build()
    except MenuError as e:
        logger.error(f"Failed to build menu: {e}")
        sys.exit(1)
    if args.select and not app.select(args.select):
        sys.exit(1)


if __name__ == "__main__":
    main()
