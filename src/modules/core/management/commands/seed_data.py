from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = {
    "electronics": [
        "Monitor 27\"",
        "Mechanical Keyboard",
        "Gaming Mouse",
        "Notebook 14\"",
        "Headset",
    ],
    "furniture": [
        "Office Desk",
        "Ergonomic Chair",
        "Bookcase",
        "Wardrobe",
        "Two-seat Sofa",
    ],
    "stationery": [
        "A4 Paper",
        "Blue Pen",
        "Notebook",
        "Stapler",
        "Sticky Notes",
        "Planner",
        "Highlighter",
        "Calculator",
        "LED Lamp",
        "Laptop Stand",
    ],
}


class Command(BaseCommand):
    help = "Seed the product catalog with development data."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")
        created = self._seed_products()
        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"products_created={created}, "
                f"categories={len(CATALOG)}"
            )
        )

    def _seed_products(self) -> int:
        self.stdout.write("Creating products...")
        created = 0
        for category, names in CATALOG.items():
            for name in names:
                _, was_created = Product.objects.get_or_create(
                    category=category, name=name
                )
                created += int(was_created)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return created
