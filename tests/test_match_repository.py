import pytest

from domain.entities import MatchHistoryBundle, MatchRecord
from infrastructure.repositories import MatchHistoryRepository
from tests.fakes import game, history


@pytest.mark.anyio
async def test_bundle_is_columnar_and_aligned(client_stub):
    client_stub.histories["p1"] = history(
        game(win=True, lane="MIDDLE", kills=5, deaths=2, assists=3),
        game(win=False, lane="TOP", kills=1, deaths=6, assists=4, queue_id=440),
        game(win=True, lane="NONE", kills=9, deaths=0, assists=11, queue_id=450),
    )
    async with client_stub.client() as lcu:
        bundle = await MatchHistoryRepository(lcu).fetch_for_player("p1")

    assert isinstance(bundle, MatchHistoryBundle)
    assert len(bundle) == 3
    assert bundle.kills == [5, 1, 9]
    assert bundle.deaths == [2, 6, 0]
    assert bundle.assists == [3, 4, 11]
    assert bundle.wins == ["true", "false", "true"]
    assert bundle.lanes == ["MIDDLE", "TOP", "NONE"]
    assert bundle.queue_ids == [420, 440, 450]
    assert bundle.minions == [192, 192, 192]
    assert bundle.spell1_ids == [4, 4, 4]


@pytest.mark.anyio
async def test_only_first_participant_is_read(client_stub):
    client_stub.histories["p1"] = history(game(kills=2))
    async with client_stub.client() as lcu:
        bundle = await MatchHistoryRepository(lcu).fetch_for_player("p1")
    assert bundle.kills == [2]
    assert bundle.champion_ids == [103]


@pytest.mark.anyio
async def test_items_keep_seven_slots_including_empty(client_stub):
    client_stub.histories["p1"] = history(game())
    async with client_stub.client() as lcu:
        bundle = await MatchHistoryRepository(lcu).fetch_for_player("p1")
    assert bundle.items == [(3000, 3001, 3002, 3003, 3004, 3005, None)]


@pytest.mark.anyio
async def test_string_win_flag_is_normalised(client_stub):
    client_stub.histories["p1"] = history(game(win="true"), game(win="False"))
    async with client_stub.client() as lcu:
        bundle = await MatchHistoryRepository(lcu).fetch_for_player("p1")
    assert bundle.wins == ["true", "false"]


@pytest.mark.anyio
async def test_window_is_passed_as_query(client_stub):
    client_stub.histories["p1"] = history(game())
    async with client_stub.client() as lcu:
        await MatchHistoryRepository(lcu).fetch_for_player("p1", 5, 9)
    params = client_stub.requests[-1].url.params
    assert params["begIndex"] == "5"
    assert params["endIndex"] == "9"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "payload",
    [
        history(),                              # no games on record
        404,                                    # lookup failed
        500,
        {"games": []},                          # wrong shape
        {"games": {"games": "nope"}},
        {"games": {"games": [{"participants": []}]}},
        {"games": {"games": [{"participants": [{"stats": {}}]}]}},
    ],
)
async def test_no_statistics_available(client_stub, payload):
    client_stub.histories["p1"] = payload
    async with client_stub.client() as lcu:
        assert await MatchHistoryRepository(lcu).fetch_for_player("p1") is None


def test_bundle_rejects_uneven_columns():
    record = MatchRecord.from_game(game())
    bundle = MatchHistoryBundle.from_records([record, record])
    columns = {name: list(getattr(bundle, name)) for name in bundle.__dataclass_fields__}
    columns["kills"] = [1]
    with pytest.raises(ValueError):
        MatchHistoryBundle(**columns)


def test_bundle_rejects_empty_history():
    with pytest.raises(ValueError):
        MatchHistoryBundle.from_records([])


def test_only_queue_restricts_every_column():
    bundle = MatchHistoryBundle.from_records(
        [
            MatchRecord.from_game(game(kills=1, queue_id=420)),
            MatchRecord.from_game(game(kills=2, queue_id=450)),
            MatchRecord.from_game(game(kills=3, queue_id=420)),
        ]
    )
    solo = bundle.only_queue(420)
    assert solo.kills == [1, 3]
    assert len(solo.items) == 2
    assert bundle.only_queue(900) is None
