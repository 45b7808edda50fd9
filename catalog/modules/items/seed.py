"""Demo catalog loaded at startup."""

from decimal import Decimal

from .models import Item

_DEMO_ITEMS = (
    ("Master Sword", "The legendary blade that seals the darkness", "999.99", "Weapons", 1),
    ("Hylian Shield", "An indestructible shield blessed by the goddess", "750.00", "Shields", 3),
    ("Bow of Light", "A sacred bow capable of banishing evil", "650.00", "Weapons", 2),
    ("Zora Armor", "Allows swimming up waterfalls", "400.00", "Armor", 5),
    ("Korok Seed", "A gift from the forest spirits", "10.00", "Collectibles", 900),
    ("Bomb Flower", "Explosive plant found in caves", "25.00", "Consumables", 50),
    ("Hearty Radish", "Restores all hearts and adds temporary ones", "35.00", "Consumables", 20),
)


def default_catalog() -> list[Item]:
    """Fresh, unsaved copies of the demo items (ids 1..7 once seeded)."""
    return [
        Item(name=name, description=description, price=Decimal(price), category=category, stock=stock)
        for name, description, price, category, stock in _DEMO_ITEMS
    ]
