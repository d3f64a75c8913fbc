#!/usr/bin/env python3
"""
Seed categories and products from a JSON catalogue (sample_catalogue.json by default).
Safe to re-run: categories are matched by name, products by name within their category.

Usage:
    python scripts/seed_products.py --file scripts/sample_catalogue.json
"""
import argparse
import json
import os
import sys
from decimal import Decimal

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.db import init_db, provider
from app.models.category import Category
from app.models.product import Product
from app.repositories.category_repo import CategoryRepository
from app.repositories.product_repo import ProductRepository

DEFAULT_SOURCE = os.path.join(os.path.dirname(__file__), "sample_catalogue.json")


def _to_product(entry: dict, category_id: int) -> Product:
    return Product(
        name=entry["name"],
        price=Decimal(str(entry.get("price", "0"))),
        category_id=category_id,
        description=entry.get("description") or "",
        color=entry.get("color") or None,
        stock=int(entry.get("stock", 0) or 0),
        featured=bool(entry.get("featured", False)),
        image_url=entry.get("imageUrl") or entry.get("image_url"),
    )


def seed_from_file(path: str):
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise RuntimeError(f"Failed to parse JSON from {path}: {e}")

    categories = CategoryRepository(provider)
    products = ProductRepository(provider)
    existing = {c.name: c for c in categories.list_all()}

    created_categories = 0
    created_products = 0
    for entry in data.get("categories", []):
        category = existing.get(entry["name"])
        if category is None:
            category = categories.create(
                Category(name=entry["name"], description=entry.get("description") or "")
            )
            existing[category.name] = category
            created_categories += 1

        present = {p.name for p in products.list_by_category_id(category.category_id)}
        for item in entry.get("products", []):
            if item["name"] in present:
                continue
            products.create(_to_product(item, category.category_id))
            created_products += 1

    print("Seeded categories:", created_categories)
    print("Seeded products:", created_products)


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", default=DEFAULT_SOURCE, help="Path to catalogue json")
    args = parser.parse_args()
    if not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)
    init_db()
    seed_from_file(args.file)
