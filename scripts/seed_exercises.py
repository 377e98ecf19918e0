import asyncio
import os
import sys

# Add parent directory to path so we can import app modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.exercise_catalog import EXERCISE_CATALOG
from app.db.session import create_db_engine, create_session_maker
from app.models.exercise import Exercise


async def seed_catalog(session: AsyncSession) -> int:
    """Insert catalog exercises whose name is not in the table yet. Returns how many were added."""
    result = await session.execute(select(Exercise.name))
    existing = set(result.scalars().all())
    added = 0
    for entry in EXERCISE_CATALOG:
        if entry.name in existing:
            continue
        session.add(
            Exercise(
                name=entry.name,
                name_ja=entry.name_ja,
                muscle_group=entry.muscle_group,
                met=entry.met,
                input_type=entry.input_type,
                description=entry.description or None,
            )
        )
        added += 1
    await session.flush()
    return added


async def main():
    settings = get_settings()
    engine = create_db_engine(settings)
    session_maker = create_session_maker(engine)

    print("Seeding exercises...")
    async with session_maker() as session:
        added = await seed_catalog(session)
        await session.commit()

    print(f"Seeded {added} exercises ({len(EXERCISE_CATALOG) - added} already present).")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
