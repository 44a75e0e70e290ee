"""Tests for the tree transformers and the platform policy."""
import logging
import pytest
from unittest.mock import MagicMock, patch

from appmenu.collaborators import Collaborators
from appmenu.menu import Action, RoleAction, Separator, Submenu
from appmenu.platform_policy import file_menu_extras, file_menu_index, is_primary_platform
from appmenu.transformers import (
    append, customize_view, inject_preferences, remove_labeled, replace_children,
    replace_help, splice,
)


@pytest.fixture
def collaborators():
    return Collaborators(MagicMock(), MagicMock(), MagicMock(), MagicMock(), MagicMock())


def action(label):
    return Action(label, lambda: None)


class TestSubtreeOperations:
    """Test the generic child operations."""

    def test_remove_labeled(self):
        """Test every child with the label is dropped and counted."""
        menu = Submenu("View", [action("A"), action("B"), action("A")])
        assert remove_labeled(menu, "A") == 2
        assert [c.label for c in menu.children] == ["B"]

    def test_remove_labeled_nothing_to_remove(self):
        """Test removal of an absent label leaves children intact."""
        menu = Submenu("View", [action("A")])
        assert remove_labeled(menu, "Z") == 0
        assert len(menu.children) == 1

    def test_splice(self):
        """Test nodes are inserted at the index."""
        menu = Submenu("App", [action("About"), Separator(), action("Services")])
        splice(menu, 2, [action("X"), action("Y")])
        assert [c.label for c in menu.children] == ["About", None, "X", "Y", "Services"]

    def test_splice_past_end(self):
        """Test an index beyond the end appends."""
        menu = Submenu("App", [action("About")])
        splice(menu, 2, [action("X")])
        assert [c.label for c in menu.children] == ["About", "X"]

    def test_append_and_replace(self):
        """Test append adds at the end and replace discards old children."""
        menu = Submenu("Help", [action("Learn More")])
        append(menu, [action("More")])
        assert [c.label for c in menu.children] == ["Learn More", "More"]
        replace_children(menu, [action("Only")])
        assert [c.label for c in menu.children] == ["Only"]


class TestNamedTransformers:
    """Test the View, Help and identity menu transformers."""

    def test_inject_preferences(self):
        """Test preferences land at index 2 of the identity menu."""
        app_menu = Submenu("Fiddle", [action("About"), Separator(), action("Services")])
        prefs = [Separator(), action("Preferences"), Separator()]
        assert inject_preferences([app_menu], "Fiddle", prefs) is True
        assert app_menu.children[2:5] == prefs
        assert app_menu.children[-1].label == "Services"

    def test_inject_preferences_missing_menu(self, caplog):
        """Test a missing identity menu is skipped with a warning."""
        tree = [Submenu("Edit")]
        with caplog.at_level(logging.WARNING):
            assert inject_preferences(tree, "Fiddle", [action("Preferences")]) is False
        assert "Fiddle" in caplog.text
        assert tree[0].children == []

    def test_customize_view(self):
        """Test View loses developer tools and gains zoom roles."""
        view = Submenu("View", [
            RoleAction("toggledevtools", label="Toggle Developer Tools"),
            Separator(),
            action("Reload"),
        ])
        assert customize_view([view]) is True
        assert "Toggle Developer Tools" not in [c.label for c in view.children]
        assert isinstance(view.children[-4], Separator)
        assert [c.role for c in view.children[-3:]] == ['resetzoom', 'zoomin', 'zoomout']

    def test_customize_view_missing_menu(self, caplog):
        """Test a missing View menu is skipped with a warning."""
        tree = [Submenu("Edit", [action("Copy")])]
        with caplog.at_level(logging.WARNING):
            assert customize_view(tree) is False
        assert "'View' not found" in caplog.text
        assert [c.label for c in tree[0].children] == ["Copy"]

    def test_customize_view_role_entry(self):
        """Test a View entry that is not a submenu is left alone."""
        view = RoleAction("viewmenu", label="View")
        assert customize_view([view]) is False

    def test_replace_help(self):
        """Test Help content is replaced entirely."""
        help_menu = Submenu("Help", [action("Learn More")])
        items = [Separator(), action("Show Welcome Tour")]
        assert replace_help([help_menu], items) is True
        assert help_menu.children == items

    def test_replace_help_missing(self, caplog):
        """Test a tree without Help is untouched and a warning is logged."""
        tree = [Submenu("Edit", [action("Copy")])]
        with caplog.at_level(logging.WARNING):
            assert replace_help(tree, [Separator()]) is False
        assert "'Help' not found" in caplog.text
        assert [c.label for c in tree[0].children] == ["Copy"]


class TestPlatformPolicy:
    """Test the primary platform decision."""

    @pytest.mark.parametrize("system", ["Darwin", "darwin", "macos"])
    def test_primary_systems(self, system):
        """Test macOS names select the primary layout."""
        assert is_primary_platform(system) is True

    @pytest.mark.parametrize("system", ["Linux", "linux", "Windows", "win32"])
    def test_other_systems(self, system):
        """Test other systems do not."""
        assert is_primary_platform(system) is False

    def test_defaults_to_host(self):
        """Test the host platform is consulted when none is given."""
        with patch('appmenu.platform_policy.platform.system', return_value='Darwin'):
            assert is_primary_platform() is True
        with patch('appmenu.platform_policy.platform.system', return_value='Linux'):
            assert is_primary_platform() is False

    def test_file_extras(self, collaborators):
        """Test File extras are Preferences then Exit off the primary platform."""
        assert file_menu_extras(collaborators, True) == []
        extras = file_menu_extras(collaborators, False)
        assert [node.label for node in extras] == [None, "Preferences", None, None, "Exit"]

    def test_file_index(self):
        """Test File follows the identity menu only on the primary platform."""
        assert file_menu_index(True) == 1
        assert file_menu_index(False) == 0
