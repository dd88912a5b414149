"""Product — a catalog record.

Products are owned by the catalog. The pricing pipeline only ever reads
them; orders copy the name and price at creation time.
"""

from __future__ import annotations

from dataclasses import dataclass

from pcs.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """An immutable product in the catalog.

    The price is not validated here: a catalog carrying a zero or
    negative price is accepted and flows through the arithmetic.
    """

    id: str
    name: str
    price: Money
