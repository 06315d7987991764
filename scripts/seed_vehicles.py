#!/usr/bin/env python3
"""
Seed the vehicles table with the storefront's reference catalog.

- Fixed list: same catalog every run
- Idempotent: clears the table before inserting

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_vehicles.py
"""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tienda_motos.domain.vehicle import VehicleCategory
from tienda_motos.infra.db.models.vehicle import VehicleRow
from tienda_motos.infra.db.session import get_session


# brand, reference, price (COP), displacement (cc), categories
CATALOG: list[tuple[str, str, str, int | None, list[VehicleCategory]]] = [
    ("Victory", "Advance R 125", "5990000", 125, [VehicleCategory.URBAN_WORK]),
    ("Victory", "One 100", "4290000", 100, [VehicleCategory.URBAN_WORK]),
    ("Victory", "MRX 150", "8190000", 150, [VehicleCategory.OFF_ROAD]),
    ("Victory", "Bomber 125", "5590000", 125, [VehicleCategory.URBAN_WORK]),
    ("TVS", "Raider 125", "7390000", 125, [VehicleCategory.SPORT, VehicleCategory.URBAN_WORK]),
    ("TVS", "Sport 100", "4890000", 100, [VehicleCategory.URBAN_WORK]),
    ("TVS", "NTorq 125", "8690000", 125, [VehicleCategory.AUTOMATIC]),
    ("TVS", "Apache RTR 200", "11490000", 200, [VehicleCategory.SPORT]),
    ("TVS", "King Deluxe", "19990000", 200, [VehicleCategory.CARGO]),
    ("Ceronte", "Tricargo 300", "26990000", 300, [VehicleCategory.CARGO]),
    ("Kawasaki", "KLX 150", "13990000", 150, [VehicleCategory.OFF_ROAD]),
    ("Kawasaki", "Z400", "29990000", 399, [VehicleCategory.SPORT]),
    ("Starker", "Fit 2.0", "5490000", None, [VehicleCategory.ELECTRIC]),
]


def build_rows() -> list[VehicleRow]:
    return [
        VehicleRow(
            brand=brand,
            reference=reference,
            price=Decimal(price),
            displacement_cc=displacement,
            categories=[category.value for category in categories],
        )
        for brand, reference, price, displacement, categories in CATALOG
    ]


def seed_vehicles() -> None:
    print(f"Seeding database with {len(CATALOG)} vehicles...")

    with get_session() as session:
        deleted_count = session.query(VehicleRow).delete()
        print(f"   Deleted {deleted_count} existing vehicles")

        rows = build_rows()
        session.add_all(rows)
        session.flush()

        for row in rows:
            print(f"   {row.id}  {row.brand} {row.reference} - ${row.price:,.0f}")


if __name__ == "__main__":
    try:
        seed_vehicles()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
