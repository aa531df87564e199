"""Display and cart rules for menus.

Prices stay the strings the owner typed. Only the cart turns them into
numbers, and it does so leniently: every character that is not a digit or
a decimal point is dropped and whatever number is left at the front counts.
"""
import re
from dataclasses import dataclass, field, replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

UNCATEGORIZED = "Uncategorized"
CURRENCY_SYMBOL = "$"
CENTS = Decimal("0.01")

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")

T = TypeVar("T")


def category_label(category: Optional[str]) -> str:
    return category if category and category.strip() else UNCATEGORIZED

def group_by_category(items: Iterable[T]) -> Dict[str, List[T]]:
    """Partition items by category, categories in first-seen order."""
    groups: Dict[str, List[T]] = {}
    for item in items:
        groups.setdefault(category_label(getattr(item, "category", None)), []).append(item)
    return groups

def display_price(price: str) -> str:
    return price if price.startswith(CURRENCY_SYMBOL) else f"{CURRENCY_SYMBOL}{price}"

def price_value(price: Optional[str]) -> Decimal:
    if not price:
        return Decimal(0)
    match = _LEADING_NUMBER.match(_NON_NUMERIC.sub("", price))
    return Decimal(match.group()) if match else Decimal(0)

def parse_price(price: Optional[str]) -> float:
    """``"$12.50"`` -> 12.5, ``"free"`` -> 0.0. Never raises."""
    return float(price_value(price))

def format_amount(amount) -> str:
    return f"{Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP):.2f}"

def badges(item) -> List[str]:
    """Promotional labels in display order; any combination may be set."""
    labels = []
    if getattr(item, "is_bestseller", False):
        labels.append("Bestseller")
    if getattr(item, "is_chefs_pick", False):
        labels.append("Chef's Pick")
    if getattr(item, "is_todays_special", False):
        labels.append("Today's Special")
    return labels

def default_selection(records: Sequence[T]) -> Optional[T]:
    """The record a single-selection UI shows first: the lowest id."""
    return min(records, key=lambda r: r.id) if records else None


@dataclass(frozen=True)
class CartEntry:
    item_id: int
    name: str
    price: str
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return price_value(self.price) * self.quantity


@dataclass(frozen=True)
class Cart:
    """A diner's order in progress. Every operation returns a new cart."""

    entries: Tuple[CartEntry, ...] = field(default_factory=tuple)

    def get(self, item_id: int) -> Optional[CartEntry]:
        for entry in self.entries:
            if entry.item_id == item_id:
                return entry
        return None

    def add(self, item_id: int, name: str, price: str) -> "Cart":
        if self.get(item_id) is not None:
            return self.change_quantity(item_id, 1)
        return Cart(self.entries + (CartEntry(item_id, name, price, 1),))

    def change_quantity(self, item_id: int, delta: int) -> "Cart":
        """Apply ``delta``; entries that reach zero or less are removed."""
        entries = []
        for entry in self.entries:
            if entry.item_id == item_id:
                quantity = entry.quantity + delta
                if quantity <= 0:
                    continue
                entry = replace(entry, quantity=quantity)
            entries.append(entry)
        return Cart(tuple(entries))

    @property
    def count(self) -> int:
        return sum(e.quantity for e in self.entries)

    def total(self) -> Decimal:
        """Exact sum of line totals, rounded half-up to cents once at the end."""
        return sum((e.line_total for e in self.entries), Decimal(0)).quantize(CENTS, rounding=ROUND_HALF_UP)

    def total_display(self) -> str:
        return format_amount(self.total())

    def __len__(self) -> int:
        return len(self.entries)
