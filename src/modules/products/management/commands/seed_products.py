from __future__ import annotations

import random
from datetime import timedelta
from decimal import Decimal

import uuid6
from django.core.management.base import BaseCommand
from django.utils import timezone

from modules.products.models import Product

PRODUCT_NAMES = [
    "Laptop", "Desktop PC", "Smartphone", "Tablet", "Smart Watch",
    "Wireless Headphones", "Gaming Mouse", "Mechanical Keyboard", "Monitor", "Webcam",
    "External SSD", "Power Bank", "USB Hub", "Docking Station", "Graphics Card",
    "Processor", "RAM Memory", "Motherboard", "Power Supply", "Case",
    "Cooling Fan", "Thermal Paste", "Cable", "Adapter", "Charger",
    "Mic Stand", "Ring Light", "Camera", "Lens", "Tripod",
]

PRODUCT_ADJECTIVES = [
    "Professional", "Gaming", "Portable", "Wireless", "USB-C",
    "High-Performance", "Compact", "Ultra-Fast", "Premium", "Budget",
    "Lightweight", "Durable", "Ergonomic", "Waterproof", "RGB",
    "4K", "8K", "5G", "AI-Powered", "Programmable",
]

BATCH_SIZE = 50


class Command(BaseCommand):
    help = "Seed the catalog with generated products (skipped when products exist)."

    def add_arguments(self, parser):
        parser.add_argument("--count", type=int, default=1000)
        parser.add_argument("--seed", type=int, default=42)

    def handle(self, *args, **options):
        if Product.objects.exists():
            self.stdout.write(self.style.WARNING("Products already present, skipping seed."))
            return

        rng = random.Random(options["seed"])
        count = options["count"]
        self.stdout.write(f"Creating {count} products...")

        created = 0
        batch: list[Product] = []
        for index in range(1, count + 1):
            batch.append(self._build_product(rng, index))
            if len(batch) >= BATCH_SIZE:
                created += len(Product.objects.bulk_create(batch))
                batch = []
        if batch:
            created += len(Product.objects.bulk_create(batch))

        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={created}"))

    @staticmethod
    def _build_product(rng: random.Random, index: int) -> Product:
        now = timezone.now()
        name = f"{rng.choice(PRODUCT_ADJECTIVES)} {rng.choice(PRODUCT_NAMES)} {index}"

        created_days = rng.randint(0, 364)
        created_at = now - timedelta(
            days=created_days,
            hours=rng.randint(0, 23),
            minutes=rng.randint(0, 59),
        )
        # updated_at lands between created_at and now
        updated_at = created_at + (now - created_at) * rng.random()

        return Product(
            id=uuid6.uuid7(),
            name=name,
            image_url=f"https://example.com/images/product-{index}.jpg",
            price=Decimal(str(round(rng.uniform(10, 2010), 2))),
            description=(
                f"High-quality product: {name}. "
                "Features exceptional performance and reliability."
            ),
            stock_quantity=rng.randint(0, 499),
            created_at=created_at,
            updated_at=updated_at,
        )
