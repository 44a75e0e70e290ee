"""Menu structure and node representation."""


class MenuNode:
    """Base class for a single item in the menu tree."""
    kind = None

    def __init__(self, label=None):
        self.label = label

    @property
    def is_submenu(self):
        return False

    def __repr__(self):
        return f"{type(self).__name__}({self.label!r})"


class Action(MenuNode):
    """Invokes a zero-argument handler when selected."""
    kind = 'action'

    def __init__(self, label, handler, accelerator=None):
        super().__init__(label)
        self.handler = handler
        self.accelerator = accelerator

    def activate(self):
        return self.handler()


class Separator(MenuNode):
    """Visual divider."""
    kind = 'separator'

    def __repr__(self):
        return "Separator()"


class Submenu(MenuNode):
    """A non-leaf node with ordered children."""
    kind = 'submenu'

    def __init__(self, label, children=None):
        super().__init__(label)
        self.children = list(children) if children else []

    @property
    def is_submenu(self):
        return True


class RoleAction(MenuNode):
    """Delegates to a behavior predefined by the host platform."""
    kind = 'role'

    def __init__(self, role, label=None):
        super().__init__(label)
        self.role = role

    def __repr__(self):
        return f"RoleAction({self.role!r})"


def find_menu(tree, label):
    """Return the top-level submenu labelled ``label``, or None.

    Entries carrying the label that are not a Submenu are passed over;
    None is returned when no Submenu carries it.
    """
    for node in tree:
        if node.label == label and node.is_submenu:
            return node
    return None


def shape(node):
    """Structural fingerprint of a node or a list of nodes.

    Two trees with the same labels, roles, accelerators and ordering have
    equal shapes, whatever their handlers are.
    """
    if isinstance(node, list):
        return tuple(shape(child) for child in node)
    if isinstance(node, Submenu):
        return (node.kind, node.label, shape(node.children))
    if isinstance(node, RoleAction):
        return (node.kind, node.role)
    if isinstance(node, Action):
        return (node.kind, node.label, node.accelerator)
    return (node.kind,)


def outline(tree, indent=0):
    """Describe a tree as indented text lines."""
    lines = []
    pad = "  " * indent
    for node in tree:
        if isinstance(node, Submenu):
            lines.append(f"{pad}{node.label}")
            lines.extend(outline(node.children, indent + 1))
        elif isinstance(node, Separator):
            lines.append(f"{pad}---")
        elif isinstance(node, RoleAction):
            lines.append(f"{pad}<{node.role}>" if not node.label else f"{pad}{node.label} <{node.role}>")
        else:
            suffix = f" [{node.accelerator}]" if node.accelerator else ""
            lines.append(f"{pad}{node.label}{suffix}")
    return lines
