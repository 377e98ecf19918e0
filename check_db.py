import asyncio
import os
import sys

from sqlalchemy import text

# Add backend directory to sys.path
sys.path.append(os.getcwd())

from app.core.config import get_settings
from app.db.session import create_db_engine, create_session_maker


async def check_data():
    engine = create_db_engine(get_settings())
    async with create_session_maker(engine)() as session:
        tables = ["exercises", "workout_sessions", "workout_sets"]
        print(f"Checking tables: {tables}")
        for table in tables:
            try:
                result = await session.execute(text(f"SELECT count(*) FROM {table}"))
                print(f"Table '{table}' row count: {result.scalar()}")
            except Exception as e:
                print(f"Error querying {table}: {e}")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(check_data())
