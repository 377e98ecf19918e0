"""Tests for the built-in exercise catalog and the seeding script."""

import ast
from pathlib import Path

from app.core.enums import InputType
from app.core.exercise_catalog import EXERCISE_CATALOG
from scripts.seed_exercises import seed_catalog
from tests.conftest import API


def test_catalog_entries_are_complete_and_unique():
    assert len(EXERCISE_CATALOG) == 94
    assert len({e.key for e in EXERCISE_CATALOG}) == len(EXERCISE_CATALOG)
    assert len({e.name for e in EXERCISE_CATALOG}) == len(EXERCISE_CATALOG)
    for entry in EXERCISE_CATALOG:
        assert entry.name_ja, entry.key
        assert entry.met > 0, entry.key


def test_catalog_includes_less_common_exercises():
    by_name = {e.name: e for e in EXERCISE_CATALOG}
    for name in ("Decline Bench Press", "Dumbbell Row", "T-Bar Row", "Battle Rope", "HS Glute Drive"):
        assert name in by_name
    assert by_name["Assault Bike"].met == 12.0
    assert by_name["Swimming"].input_type is InputType.CARDIO
    assert by_name["Dead Bug"].input_type is InputType.DURATION


async def test_seed_catalog_is_idempotent_and_keeps_japanese_names(app, client, create_session):
    async with app.state.session_maker() as db:
        assert await seed_catalog(db) == len(EXERCISE_CATALOG)
        await db.commit()
    async with app.state.session_maker() as db:
        assert await seed_catalog(db) == 0
        await db.commit()

    resp = await client.get(f"{API}/exercises", params={"muscle_group": "cardio"})
    treadmill = next(e for e in resp.json() if e["name"] == "Treadmill Running")
    assert treadmill["name_ja"] == "トレッドミル"

    session = await create_session(body_weight_kg=70)
    resp = await client.post(
        f"{API}/sessions/{session['id']}/sets",
        json={"exercise_id": treadmill["id"], "weight_kg": 5, "speed_kmh": 10, "duration_minutes": 30},
    )
    (set_,) = resp.json()["sets"]
    assert set_["exercise_name_ja"] == "トレッドミル"
    assert set_["calories_burned"] == 465.5


def test_core_modules_do_not_import_services():
    core_dir = Path(__file__).resolve().parent.parent / "app" / "core"
    for path in core_dir.glob("*.py"):
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(tree):
            if isinstance(node, ast.ImportFrom):
                assert not (node.module or "").startswith("app.services"), path.name
            elif isinstance(node, ast.Import):
                assert not any(a.name.startswith("app.services") for a in node.names), path.name
