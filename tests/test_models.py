import pytest
from pydantic import ValidationError

from models import Genre, MovieDetail, MovieSummary


def test_summary_defaults():
    movie = MovieSummary(id=6, title="Inception")
    assert movie.poster_path is None
    assert movie.overview == ""
    assert movie.vote_average is None
    assert movie.release_date is None


def test_summary_ignores_unknown_fields_and_nulls():
    movie = MovieSummary.model_validate(
        {"id": 6, "title": "Inception", "overview": None, "release_date": "", "popularity": 83.1}
    )
    assert movie.overview == ""
    assert movie.release_date is None


def test_summary_requires_title():
    with pytest.raises(ValidationError):
        MovieSummary(id=1, title="")


def test_summary_is_frozen():
    movie = MovieSummary(id=6, title="Inception")
    with pytest.raises(ValidationError):
        movie.title = "Tenet"


def test_detail_reads_runtime_from_wire_name():
    movie = MovieDetail.model_validate(
        {
            "id": 27205,
            "title": "Inception",
            "runtime": 148,
            "genres": [{"id": 28, "name": "Action"}, {"id": 878, "name": "Science Fiction"}],
            "budget": 160000000,
        }
    )
    assert movie.runtime_minutes == 148
    assert movie.genres == [Genre(id=28, name="Action"), Genre(id=878, name="Science Fiction")]
    assert movie.budget == 160000000
    assert movie.revenue is None


def test_detail_rejects_negative_runtime():
    with pytest.raises(ValidationError):
        MovieDetail(id=1, title="X", runtime_minutes=-5)
