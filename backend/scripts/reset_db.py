import sys
import os
sys.path.append(os.getcwd())

from sqlalchemy import MetaData
from launchwatch.db.session import engine
from launchwatch.db.base import Base

def reset_db():
    print("Resetting database...")

    # Reflect all tables to drop everything, not just known models
    meta = MetaData()
    meta.reflect(bind=engine)

    print(f"Dropping tables: {[t.name for t in meta.sorted_tables]}")
    meta.drop_all(bind=engine)

    print("Creating all tables...")
    Base.metadata.create_all(bind=engine)
    print("Database reset complete.")

if __name__ == "__main__":
    reset_db()
