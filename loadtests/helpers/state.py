"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state — no cross-user sharing.
State tracks the product returned by the stock endpoint so follow-up
operations can reference it.
"""

from dataclasses import dataclass


@dataclass
class ProductState:
    """Tracks state for a single simulated product lifecycle."""

    product: dict | None = None
    corrections: int = 0

    @property
    def product_id(self) -> str | None:
        return self.product["id"] if self.product else None
