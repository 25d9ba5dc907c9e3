import sys
import os
sys.path.append(os.getcwd())

from sqlalchemy import inspect, text
from launchwatch.db.session import engine
from launchwatch.db.base import Base

inspector = inspect(engine)
tables = inspector.get_table_names()
print("Tables:", tables)

with engine.connect() as conn:
    for table in Base.metadata.sorted_tables:
        if table.name not in tables:
            print(f"'{table.name}' table not found!")
            continue
        cnt = conn.execute(text(f'SELECT count(*) FROM "{table.name}"')).scalar()
        print(f"{table.name}: {cnt} rows")
