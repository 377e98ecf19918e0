import asyncio
import os
import sys

# Add backend to path
sys.path.append(os.getcwd())

from sqlalchemy import text

from app.core.config import get_settings
from app.db.base import Base
from app.db.session import create_db_engine
# Import all models
from app.models import *  # noqa: F401, F403


async def drop_tables():
    print("Dropping all tables...")
    engine = create_db_engine(get_settings())
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS alembic_version"))
        await conn.run_sync(Base.metadata.drop_all)
    print("Tables dropped.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(drop_tables())
