"""Load the food catalog from a nutrition CSV.

Expected columns: 'Dish Name', 'Calories (kcal)', 'Carbohydrates (g)',
'Protein (g)'. Values are per 100g. Rows without a name or calories are
skipped.

Usage:
    python scripts/import_foods.py data/Indian_Food_Nutrition_Processed.csv
"""
import argparse
import csv
import logging
import sys

from fitlog.db import Base, SessionLocal, engine
from fitlog.models.food import Food

logger = logging.getLogger(__name__)

BATCH_SIZE = 100


def _number(value) -> float:
    try:
        return round(float(value), 2)
    except (TypeError, ValueError):
        return 0.0


def parse_foods(rows) -> list[dict]:
    foods = []
    for record in rows:
        name = (record.get("Dish Name") or "").strip()
        calories = _number(record.get("Calories (kcal)"))
        if not name or calories == 0:
            continue
        foods.append({
            "name": name,
            "calories_per_unit": calories,
            "carbs_per_unit": _number(record.get("Carbohydrates (g)")),
            "protein_per_unit": _number(record.get("Protein (g)")),
            "unit": "100g",
        })
    return foods


def import_foods(db, foods: list[dict]) -> int:
    imported = 0
    for i in range(0, len(foods), BATCH_SIZE):
        batch = foods[i:i + BATCH_SIZE]
        db.add_all([Food(**f) for f in batch])
        db.commit()
        imported += len(batch)
        logger.info("Imported batch %d (%d foods)", i // BATCH_SIZE + 1, len(batch))
    return imported


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    ap = argparse.ArgumentParser(description="Import foods from a nutrition CSV")
    ap.add_argument("csv_path")
    args = ap.parse_args(argv)

    with open(args.csv_path, newline="", encoding="utf-8") as f:
        foods = parse_foods(csv.DictReader(f))
    logger.info("Prepared %d valid foods", len(foods))

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        total = import_foods(db, foods)
    finally:
        db.close()
    logger.info("Successfully imported %d foods", total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
