"""数据源 omdb_film_by_id 测试"""

from __future__ import annotations

import pytest

from omdb_provider.core.models import ProviderData
from omdb_provider.services.film_by_id import FilmByIdDataSource


@pytest.fixture()
def ds(provider_data: ProviderData) -> FilmByIdDataSource:
    d = FilmByIdDataSource()
    assert not d.configure(provider_data).has_error()
    return d


class TestFilmByIdMetadata:
    def test_type_name(self) -> None:
        assert FilmByIdDataSource().metadata("omdb") == "omdb_film_by_id"

    def test_schema(self) -> None:
        attrs = {a.name: a for a in FilmByIdDataSource().schema().attributes}
        assert attrs["imdb_id"].required
        assert attrs["title"].computed and attrs["year"].computed
        assert [n.name for n in attrs["ratings"].nested] == ["source", "value"]


class TestFilmByIdConfigure:
    def test_none_is_noop(self) -> None:
        assert FilmByIdDataSource().configure(None) == []

    def test_wrong_type(self) -> None:
        diags = FilmByIdDataSource().configure({"api_key": "k"})
        assert diags.has_error()
        assert diags[0].summary == "Unexpected Data Source Configure Type"


class TestFilmByIdRead:
    def test_read_deterministic(self, ds, fake_omdb) -> None:
        resp = ds.read({"imdb_id": "tt0111161"})
        assert resp.ok
        assert resp.state == {
            "imdb_id": "tt0111161",
            "title": "The Shawshank Redemption",
            "year": "1994",
            "ratings": [
                {"source": "Internet Movie Database", "value": "9.3/10"},
                {"source": "Rotten Tomatoes", "value": "91%"},
                {"source": "Metacritic", "value": "82/100"},
            ],
        }
        assert ds.read({"imdb_id": "tt0111161"}).state == resp.state

    def test_imdb_id_from_config_not_response(self, ds, fake_omdb) -> None:
        fake_omdb.payload = {"Title": "X", "Year": "2000", "imdbID": "tt9999999"}
        resp = ds.read({"imdb_id": "tt0000001"})
        assert resp.state["imdb_id"] == "tt0000001"
        assert resp.state["ratings"] == []

    def test_missing_imdb_id(self, ds, fake_omdb) -> None:
        resp = ds.read({})
        assert resp.diagnostics.has_error()
        assert resp.state is None
        assert fake_omdb.calls == []

    def test_computed_attributes_may_be_null(self, ds, fake_omdb) -> None:
        resp = ds.read({"imdb_id": "tt0111161", "title": None, "year": None, "ratings": None})
        assert resp.ok

    def test_transport_failure(self, ds, unreachable_omdb) -> None:
        resp = ds.read({"imdb_id": "tt0111161"})
        assert resp.state is None
        err = resp.diagnostics.errors()[0]
        assert err.summary == "error making OMDb request"
        assert err.code == "API_ERROR"

    def test_decode_failure(self, ds, fake_omdb) -> None:
        fake_omdb.body = b"not json"
        resp = ds.read({"imdb_id": "tt0111161"})
        err = resp.diagnostics.errors()[0]
        assert err.summary == "error decoding API response"
        assert err.code == "API_DECODE_ERROR"

    def test_omdb_not_found(self, ds, fake_omdb) -> None:
        fake_omdb.payload = {"Response": "False", "Error": "Incorrect IMDb ID."}
        resp = ds.read({"imdb_id": "tt0"})
        assert "Incorrect IMDb ID." in resp.diagnostics.errors()[0].detail
        assert resp.diagnostics.errors()[0].code == "FILM_NOT_FOUND"

    def test_unconfigured(self, fake_omdb) -> None:
        resp = FilmByIdDataSource().read({"imdb_id": "tt0111161"})
        assert resp.diagnostics.errors()[0].code == "NOT_CONFIGURED"
        assert fake_omdb.calls == []
