import sys
import os

# Set python path to include launchwatch
sys.path.append(os.getcwd())

from launchwatch.db.session import SessionLocal, init_db
from launchwatch.models.launch import Launch
from launchwatch.services.seed import seed_demo_data

def seed():
    print("Creating tables...")
    init_db()
    db = SessionLocal()
    try:
        created = seed_demo_data(db)
        if created:
            print(f"Seeded {created} launches.")
        else:
            print("Launches already present, nothing to do.")
        print(f"Total launches in DB: {db.query(Launch).count()}")
    finally:
        db.close()

if __name__ == "__main__":
    seed()
