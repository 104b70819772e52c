"""Tree renderer: Criteria expression → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from criteriakit.application.builder import BuiltCriteria

if TYPE_CHECKING:
    from criteriakit.domain.criteria import Criteria


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Configuration for tree renderer.

    Attributes:
        width: Console width in characters.
        color: Emit ANSI styles. False = plain text.
        show_order: Show ORDER BY leaf for built composites.
    """

    width: int = 120
    color: bool = False
    show_order: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class TreeRenderer:
    """Renders criteria expression as an indented tree.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: TreeConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Renderer configuration. Uses defaults if None.
        """
        self._config = config or TreeConfig()

    def render(self, criteria: Criteria) -> str:
        """Format criteria tree.

        Args:
            criteria: Root of expression to render.

        Returns:
            Rendered tree text.
        """
        if criteria is None:
            raise TypeError("criteria must not be None")

        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            color_system="standard" if self._config.color else None,
            width=self._config.width,
        )
        console.print(self._build(criteria))
        return output.getvalue()

    def _build(self, criteria: Criteria) -> Tree:
        tree = Tree(self._node_label(criteria))
        self._attach(tree, criteria)
        return tree

    def _attach(self, tree: Tree, criteria: Criteria) -> None:
        """Add children recursively."""
        for child in criteria.children:
            branch = tree.add(self._node_label(child))
            self._attach(branch, child)

        if self._config.show_order and isinstance(criteria, BuiltCriteria):
            if criteria.order_by is not None:
                tree.add(f"[magenta]ORDER BY[/magenta] {escape(str(criteria.order_by))}")

    @staticmethod
    def _node_label(criteria: Criteria) -> str:
        label = escape(criteria.label)
        if criteria.children or isinstance(criteria, BuiltCriteria):
            return f"[bold]{label}[/bold]"
        return f"[cyan]{label}[/cyan]"
