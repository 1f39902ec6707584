import asyncio
import json
import os
import sys

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app.core.db import SessionLocal, init_models
from app.modules.hospitals.repository import HospitalRepository

FIELDS = (
    "name", "address", "city", "state", "zip_code", "phone_number", "email",
    "website", "latitude", "longitude", "specialties", "rating", "total_reviews",
)

async def seed(db, rows: list[dict]) -> int:
    """
    Inserts hospitals whose (name, city) pair is not present yet. Returns the number inserted.
    """
    repo = HospitalRepository(db)
    created = 0
    for row in rows:
        print(f"Processing hospital: {row['name']} in {row['city']}")
        if await repo.find_by_name_city(row["name"], row["city"]):
            print("  - Already present. Skipping.")
            continue
        hospital = await repo.create(**{k: row[k] for k in FIELDS if k in row})
        created += 1
        print(f"    ...created hospital with ID: {hospital.id}")
    return created

async def main(path: str):
    print("Starting hospital seeding...")
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    await init_models()
    async with SessionLocal() as db:
        created = await seed(db, data)
        print("\nCommitting all changes to the database...")
        await db.commit()
    print(f"Seeding complete! {created} hospital(s) added.")

if __name__ == "__main__":
    default_path = os.path.join(os.path.dirname(__file__), 'hospitals.sample.json')
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else default_path))
