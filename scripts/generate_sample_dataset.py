#!/usr/bin/env python3
"""
Generate a sample product transaction dataset as JSON.

The output has the same shape as the remote dataset and can be loaded
with scripts/load_dataset.py for offline work.

Usage:
  python scripts/generate_sample_dataset.py [output.json] [count]
"""

import json
import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

CATEGORIES = {
    "men's clothing": ["Cotton Jacket", "Slim Fit T-Shirt", "Casual Shirt"],
    "women's clothing": ["Rain Jacket", "Short Sleeve Top", "Moisture Wicking Tee"],
    "jewelery": ["Gold Bracelet", "Silver Ring", "Pearl Necklace"],
    "electronics": ["Portable SSD 1TB", "27-inch Monitor", "USB-C Hard Drive"],
}


def generate(count: int, seed: int = 42) -> list[dict]:
    """Generate ``count`` records spread over 2021-06 .. 2022-05."""
    rng = random.Random(seed)
    start = datetime(2021, 6, 1)
    records = []
    for i in range(1, count + 1):
        category = rng.choice(sorted(CATEGORIES))
        title = rng.choice(CATEGORIES[category])
        sold_at = start + timedelta(minutes=rng.randrange(365 * 24 * 60))
        records.append({
            "id": i,
            "title": title,
            "price": round(rng.uniform(5, 1100), 2),
            "description": f"{title} ({category})",
            "category": category,
            "image": f"https://example.com/img/{i}.jpg",
            "sold": rng.random() < 0.5,
            "dateOfSale": sold_at.strftime("%Y-%m-%dT%H:%M:%S+05:30"),
        })
    return records


def main(argv: list[str]) -> int:
    output = Path(argv[0]) if argv else Path("data/sample_transactions.json")
    count = int(argv[1]) if len(argv) > 1 else 60

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(generate(count), indent=2), encoding="utf-8")
    print(f"✓ Wrote {count} records to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
