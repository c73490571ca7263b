"""Dashboard UI state passed explicitly to the views that render it.

Holds the sidebar collapse flag and the selected granularity. Each field has
exactly one writer action; views read the fields and call the actions rather
than mutating shared globals.
"""
from __future__ import annotations

from dataclasses import dataclass

from inventory_dashboard.aggregate.keys import Granularity, parse_granularity


@dataclass(frozen=True)
class NavLink:
    href: str
    label: str


NAV_LINKS: tuple[NavLink, ...] = (
    NavLink("/dashboard", "Dashboard"),
    NavLink("/inventory", "Inventory"),
    NavLink("/products", "Products"),
    NavLink("/users", "Users"),
    NavLink("/settings", "Settings"),
    NavLink("/expenses", "Expenses"),
)

HOME_HREF = "/dashboard"


def is_active(link: NavLink, pathname: str) -> bool:
    """True when `link` points at `pathname`; the root path maps to the dashboard."""
    return pathname == link.href or (pathname == "/" and link.href == HOME_HREF)


@dataclass
class DashboardState:
    """Mutable view state shared by the sidebar and the sales summary card."""
    sidebar_collapsed: bool = False
    granularity: Granularity = Granularity.WEEKLY

    def toggle_sidebar(self) -> bool:
        """Flip the collapse flag and return the new value."""
        self.sidebar_collapsed = not self.sidebar_collapsed
        return self.sidebar_collapsed

    def set_granularity(self, value: Granularity | str) -> Granularity:
        """Select a granularity.

        Raises:
            ValueError: if `value` is not daily, weekly or monthly.
        """
        self.granularity = parse_granularity(value)
        return self.granularity
