"""数据模型 JSON / state 映射测试"""

import pytest

from omdb_provider.core.models import FilmLookup, FilmRecord, FilmState, Rating


class TestFilmRecord:
    def test_from_omdb_payload(self) -> None:
        rec = FilmRecord.from_json({
            "Title": "Heat", "Year": "1995", "imdbID": "tt0113277",
            "Ratings": [{"Source": "Metacritic", "Value": "76/100"}],
        })
        assert rec.title == "Heat"
        assert rec.year == "1995"
        assert rec.ratings == [Rating("Metacritic", "76/100")]

    def test_missing_or_null_ratings(self) -> None:
        assert FilmRecord.from_json({"Title": "X"}).ratings == []
        assert FilmRecord.from_json({"Title": "X", "Ratings": None}).ratings == []

    def test_ratings_not_list_raises(self) -> None:
        with pytest.raises(TypeError):
            FilmRecord.from_json({"Title": "X", "Ratings": "9/10"})

    @pytest.mark.parametrize("payload", [
        {"Title": 1, "Year": "1999"},
        {"Title": "X", "Year": 1999},
        {"Title": "X", "Ratings": [None]},
        {"Title": "X", "Ratings": [{"Source": "IMDb", "Value": 8}]},
        {"Title": "X", "Ratings": ""},
    ])
    def test_mistyped_fields_raise(self, payload) -> None:
        with pytest.raises(TypeError):
            FilmRecord.from_json(payload)

    def test_null_strings_are_empty(self) -> None:
        rec = FilmRecord.from_json({"Title": None, "Year": None})
        assert (rec.title, rec.year) == ("", "")

    def test_to_json_omits_empty_ratings(self) -> None:
        assert FilmRecord(title="X", year="1999").to_json() == {"Title": "X", "Year": "1999"}

    def test_to_json_uses_api_field_names(self) -> None:
        rec = FilmRecord(title="X", year="1999", ratings=[Rating("IMDb", "8/10")])
        assert rec.to_json()["Ratings"] == [{"Source": "IMDb", "Value": "8/10"}]


class TestFilmState:
    def test_from_state_empty_ratings_is_none(self) -> None:
        assert FilmState.from_state({"title": "X", "year": "1", "ratings": []}).ratings is None
        assert FilmState.from_state({"title": "X", "year": "1"}).ratings is None

    def test_state_roundtrip_through_record(self) -> None:
        plan = {
            "id": None, "title": "X", "year": "1999",
            "ratings": [{"source": "IMDb", "value": "8/10"}],
        }
        film = FilmState.from_state(plan)
        back = FilmState.from_record("abc", film.to_record()).to_state()
        assert back == {**plan, "id": "abc"}

    def test_blank_id_treated_as_unset(self) -> None:
        assert FilmState.from_state({"id": "", "title": "X", "year": "1"}).id is None


class TestFilmLookup:
    def test_to_state(self) -> None:
        rec = FilmRecord(title="Heat", year="1995", ratings=[Rating("IMDb", "8.3/10")])
        state = FilmLookup.from_record("tt0113277", rec).to_state()
        assert state == {
            "imdb_id": "tt0113277",
            "title": "Heat",
            "year": "1995",
            "ratings": [{"source": "IMDb", "value": "8.3/10"}],
        }
