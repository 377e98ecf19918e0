"""HTTP tests for sessions and sets against an in-memory SQLite database."""

import uuid
from datetime import date

import pytest

from app.core.enums import InputType
from app.services.guest_store import ExerciseInfo, GuestWorkoutStore
from app.services.set_assembly import RawSetInput
from tests.conftest import API


async def _add_set(client, session_id, **body):
    return await client.post(f"{API}/sessions/{session_id}/sets", json=body)


# =============================================================================
# Sessions
# =============================================================================


async def test_create_session_starts_empty(create_session):
    session = await create_session(body_weight_kg=70, note="push day")
    assert session["body_weight_kg"] == 70
    assert session["note"] == "push day"
    assert session["sets"] == []
    assert session["total_sets"] == 0
    assert session["total_calories_burned"] == 0


@pytest.mark.parametrize("body_weight", [0, -5])
async def test_create_session_rejects_non_positive_body_weight(client, body_weight):
    resp = await client.post(
        f"{API}/sessions", json={"session_date": "2026-10-19", "body_weight_kg": body_weight}
    )
    assert resp.status_code == 422


async def test_get_missing_session_is_404(client):
    resp = await client.get(f"{API}/sessions/{uuid.uuid4()}")
    assert resp.status_code == 404


async def test_list_sessions_newest_first_with_date_filter(client, create_session):
    older = await create_session(session_date="2026-09-01")
    newer = await create_session(session_date="2026-10-10")

    resp = await client.get(f"{API}/sessions")
    assert [s["id"] for s in resp.json()] == [newer["id"], older["id"]]

    resp = await client.get(f"{API}/sessions", params={"from_date": "2026-10-01"})
    assert [s["id"] for s in resp.json()] == [newer["id"]]


async def test_update_session_note_and_body_weight(client, create_session):
    session = await create_session(body_weight_kg=70)
    resp = await client.patch(
        f"{API}/sessions/{session['id']}", json={"note": "felt strong", "body_weight_kg": 71.5}
    )
    assert resp.status_code == 200
    assert resp.json()["note"] == "felt strong"
    assert resp.json()["body_weight_kg"] == 71.5

    resp = await client.patch(f"{API}/sessions/{session['id']}", json={"body_weight_kg": 0})
    assert resp.status_code == 422

    resp = await client.patch(f"{API}/sessions/{session['id']}", json={"body_weight_kg": None})
    assert resp.status_code == 400
    resp = await client.get(f"{API}/sessions/{session['id']}")
    assert resp.json()["body_weight_kg"] == 71.5


async def test_delete_session(client, create_session, create_exercise):
    exercise = await create_exercise()
    session = await create_session()
    await _add_set(client, session["id"], exercise_id=exercise["id"], reps=5, weight_kg=50)

    resp = await client.delete(f"{API}/sessions/{session['id']}")
    assert resp.status_code == 204
    resp = await client.get(f"{API}/sessions/{session['id']}")
    assert resp.status_code == 404


# =============================================================================
# Adding sets
# =============================================================================


async def test_add_weighted_set_estimates_duration(client, create_session, create_exercise):
    exercise = await create_exercise(met=6.0, input_type="reps_weight")
    session = await create_session(body_weight_kg=70)

    resp = await _add_set(client, session["id"], exercise_id=exercise["id"], reps=10, weight_kg=60)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    (set_,) = body["sets"]
    assert set_["set_number"] == 1
    assert set_["duration_minutes"] == pytest.approx(1.67)
    assert set_["calories_burned"] == 17.5
    assert set_["weight_kg"] == 60
    assert set_["speed_kmh"] == 0
    assert set_["exercise_name"] == "Bench Press"
    assert body["total_sets"] == 1


async def test_set_number_is_prior_count_plus_one(client, create_session, create_exercise):
    exercise = await create_exercise()
    session = await create_session()
    for _ in range(3):
        resp = await _add_set(client, session["id"], exercise_id=exercise["id"], reps=8, weight_kg=40)
    assert [s["set_number"] for s in resp.json()["sets"]] == [1, 2, 3]


async def test_add_cardio_set_uses_acsm_and_keeps_raw_fields(client, create_session, create_exercise):
    treadmill = await create_exercise(
        name="Treadmill Running", met=8.0, input_type="cardio", muscle_group="cardio"
    )
    session = await create_session(body_weight_kg=70)

    resp = await _add_set(
        client,
        session["id"],
        exercise_id=treadmill["id"],
        reps=0,
        weight_kg=5,
        speed_kmh=10,
        duration_minutes=30,
    )
    assert resp.status_code == 201, resp.text
    (set_,) = resp.json()["sets"]
    assert set_["weight_kg"] == 5
    assert set_["speed_kmh"] == 10
    assert set_["duration_minutes"] == 30
    assert set_["calories_burned"] == 465.5


async def test_add_timed_hold_defaults_to_one_minute(client, create_session, create_exercise):
    plank = await create_exercise(name="Plank", met=3.0, input_type="duration", muscle_group="core")
    session = await create_session(body_weight_kg=70)

    resp = await _add_set(client, session["id"], exercise_id=plank["id"], reps=0, weight_kg=0)
    (set_,) = resp.json()["sets"]
    assert set_["duration_minutes"] == 1.0
    assert set_["calories_burned"] == 3.7


async def test_add_set_unknown_exercise_is_404(client, create_session):
    session = await create_session()
    resp = await _add_set(client, session["id"], exercise_id=str(uuid.uuid4()), reps=5, weight_kg=20)
    assert resp.status_code == 404
    resp = await client.get(f"{API}/sessions/{session['id']}")
    assert resp.json()["sets"] == []


async def test_add_set_unknown_session_is_404(client, create_exercise):
    exercise = await create_exercise()
    resp = await _add_set(client, str(uuid.uuid4()), exercise_id=exercise["id"], reps=5, weight_kg=20)
    assert resp.status_code == 404


async def test_add_set_rejects_negative_input(client, create_session, create_exercise):
    exercise = await create_exercise()
    session = await create_session()
    resp = await _add_set(client, session["id"], exercise_id=exercise["id"], reps=-1, weight_kg=20)
    assert resp.status_code == 422


# =============================================================================
# Removing sets and totals
# =============================================================================


async def test_remove_set_renumbers_remaining_sets(client, create_session, create_exercise):
    exercise = await create_exercise()
    session = await create_session()
    for reps in (5, 8, 10):
        resp = await _add_set(client, session["id"], exercise_id=exercise["id"], reps=reps, weight_kg=40)
    middle = resp.json()["sets"][1]

    resp = await client.delete(f"{API}/sessions/{session['id']}/sets/{middle['id']}")
    assert resp.status_code == 200
    assert [(s["reps"], s["set_number"]) for s in resp.json()["sets"]] == [(5, 1), (10, 2)]

    resp = await _add_set(client, session["id"], exercise_id=exercise["id"], reps=12, weight_kg=40)
    assert [s["set_number"] for s in resp.json()["sets"]] == [1, 2, 3]


async def test_remove_missing_set_is_404(client, create_session):
    session = await create_session()
    resp = await client.delete(f"{API}/sessions/{session['id']}/sets/{uuid.uuid4()}")
    assert resp.status_code == 404


async def test_totals_match_current_sets(client, create_session, create_exercise):
    bench = await create_exercise(met=6.0)
    treadmill = await create_exercise(name="Treadmill", met=8.0, input_type="cardio", muscle_group="cardio")
    session = await create_session(body_weight_kg=70)

    await _add_set(client, session["id"], exercise_id=bench["id"], reps=10, weight_kg=60)
    resp = await _add_set(
        client, session["id"], exercise_id=treadmill["id"], reps=0, weight_kg=5, speed_kmh=10, duration_minutes=30
    )
    body = resp.json()
    assert body["total_sets"] == 2
    assert body["total_calories_burned"] == 483.0
    assert body["total_volume"] == 600.0
    assert body["total_duration_minutes"] == pytest.approx(31.67)

    cardio_id = body["sets"][1]["id"]
    resp = await client.delete(f"{API}/sessions/{session['id']}/sets/{cardio_id}")
    body = resp.json()
    assert body["total_sets"] == 1
    assert body["total_calories_burned"] == sum(s["calories_burned"] for s in body["sets"])


# =============================================================================
# Stored sessions and guest sessions agree
# =============================================================================


async def test_guest_store_matches_api(client, create_session, create_exercise):
    definitions = [
        ("Bench Press", 6.0, InputType.REPS_WEIGHT, "chest"),
        ("Push Up", 3.8, InputType.REPS_ONLY, "chest"),
        ("Plank", 3.0, InputType.DURATION, "core"),
        ("Treadmill", 8.0, InputType.CARDIO, "cardio"),
    ]
    inputs = [
        ("Bench Press", RawSetInput(reps=10, weight_kg=60)),
        ("Bench Press", RawSetInput(reps=6, weight_kg=90, rest_seconds=120)),
        ("Push Up", RawSetInput(reps=20, weight_kg=0)),
        ("Plank", RawSetInput(reps=0, weight_kg=0, duration_minutes=1.5)),
        ("Treadmill", RawSetInput(reps=0, weight_kg=2, speed_kmh=5.5, duration_minutes=20)),
        ("Treadmill", RawSetInput(reps=0, weight_kg=4)),
    ]

    ids = {}
    catalog = {}
    for name, met, input_type, group in definitions:
        exercise = await create_exercise(name=name, met=met, input_type=input_type.value, muscle_group=group)
        ids[name] = exercise["id"]
        catalog[exercise["id"]] = ExerciseInfo(met=met, input_type=input_type, name=name)

    stored = await create_session(body_weight_kg=82.5)
    guest = GuestWorkoutStore(catalog)
    guest_session = guest.create_session(date(2026, 10, 19), body_weight_kg=82.5)

    for name, raw in inputs:
        body = {k: v for k, v in vars(raw).items() if v is not None}
        resp = await _add_set(client, stored["id"], exercise_id=ids[name], **body)
        assert resp.status_code == 201, resp.text
        guest.add_set(guest_session.id, ids[name], raw)

    api_sets = resp.json()["sets"]
    guest_sets = guest.get_session(guest_session.id).sets
    fields = ("set_number", "reps", "weight_kg", "duration_minutes", "calories_burned", "speed_kmh")
    assert [tuple(s[f] for f in fields) for s in api_sets] == [
        tuple(getattr(s, f) for f in fields) for s in guest_sets
    ]

    totals = guest.totals(guest_session.id)
    assert resp.json()["total_calories_burned"] == totals.total_calories_burned
    assert resp.json()["total_volume"] == totals.total_volume
    assert resp.json()["total_duration_minutes"] == totals.total_duration_minutes
