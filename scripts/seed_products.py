#!/usr/bin/env python3
"""
Seed the products table.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Import mode: pass a JSON catalog path to load that file instead

Usage:
    python scripts/seed_products.py
    python scripts/seed_products.py data/items.json
"""

from __future__ import annotations

import random
import sys
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from product_view.adapters.json_file_catalog_source import JsonFileCatalogSource
from product_view.domain.product import Product
from product_view.infra.db.models.product import ProductRow
from product_view.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_PRODUCTS = 45

# Category → (name stems, price band)
CATEGORIES = {
    "Electronics": (
        ["Wireless Mouse", "Keyboard", "USB-C Hub", "Headphones", "Charger", "Webcam"],
        (Decimal("300"), Decimal("8000")),
    ),
    "Clothing": (
        ["T-Shirt", "Jacket", "Running Shoes", "Scarf", "Hoodie", "Jeans"],
        (Decimal("200"), Decimal("3500")),
    ),
    "Home": (
        ["Mug", "Desk Lamp", "Blanket", "Candle", "Wall Clock", "Cushion"],
        (Decimal("150"), Decimal("2500")),
    ),
    "Books": (
        ["Novel", "Cookbook", "Travel Guide", "Graphic Novel", "Atlas"],
        (Decimal("200"), Decimal("1200")),
    ),
    "Sports": (
        ["Yoga Mat", "Dumbbells", "Water Bottle", "Tennis Racket", "Helmet"],
        (Decimal("150"), Decimal("4000")),
    ),
}

ADJECTIVES = ["Classic", "Pro", "Compact", "Deluxe", "Eco", "Lite", "Premium"]


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_product(index: int) -> Product:
    """Generate a single random product; prices rounded to the nearest 10."""
    category = random.choice(list(CATEGORIES.keys()))
    stems, (price_min, price_max) = CATEGORIES[category]

    name = f"{random.choice(ADJECTIVES)} {random.choice(stems)}"
    price = Decimal(random.randint(int(price_min), int(price_max)))
    price = (price / 10).quantize(Decimal("1")) * 10

    # Roughly four out of five products are in stock
    in_stock = random.random() < 0.8

    return Product(id=str(index), name=name, category=category, price=price, in_stock=in_stock)


def to_row(product: Product, position: int) -> ProductRow:
    return ProductRow(
        id=product.id,
        position=position,
        name=product.name,
        category=product.category,
        price=product.price,
        in_stock=product.in_stock,
    )


def seed_products(products: list[Product]) -> None:
    """
    Replace the products table with the given products, keeping their order.

    Args:
        products: Products in catalog order
    """
    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing products...")
        deleted_count = session.query(ProductRow).delete()
        print(f"   Deleted {deleted_count} existing products")

        # Step 2: Insert in catalog order
        rows = [to_row(product, position) for position, product in enumerate(products)]
        session.add_all(rows)
        session.flush()

        print(f"✅ Successfully seeded {len(rows)} products!")

        print("\n📊 Sample products:")
        for i, row in enumerate(rows[:5], 1):
            stock = "in stock" if row.in_stock else "out of stock"
            print(f"   {i}. {row.name} [{row.category}] - {row.price:,.2f} ({stock})")

        if len(rows) > 5:
            print(f"   ... and {len(rows) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        if len(sys.argv) > 1:
            print(f"🌱 Importing catalog from {sys.argv[1]}...")
            catalog = JsonFileCatalogSource(sys.argv[1]).load()
        else:
            print(f"🌱 Generating {NUM_PRODUCTS} products (seed={RANDOM_SEED})...")
            random.seed(RANDOM_SEED)
            catalog = [generate_product(index) for index in range(1, NUM_PRODUCTS + 1)]

        seed_products(catalog)
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
