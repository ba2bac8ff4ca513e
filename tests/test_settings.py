"""Tests for Settings.from_env and the sample data."""

from connectify.infrastructure import Settings, get_sample_address_book


def test_defaults(monkeypatch) -> None:
    for key in ("CONNECTIFY_DEFAULT_REGION", "CONNECTIFY_LOG_LEVEL", "CONNECTIFY_SAMPLE_DATA"):
        monkeypatch.delenv(key, raising=False)
    assert Settings.from_env() == Settings(default_region=None, log_level="INFO", sample_data=False)


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("CONNECTIFY_DEFAULT_REGION", " sg ")
    monkeypatch.setenv("CONNECTIFY_LOG_LEVEL", "debug")
    monkeypatch.setenv("CONNECTIFY_SAMPLE_DATA", "Yes")
    assert Settings.from_env() == Settings(default_region="SG", log_level="DEBUG", sample_data=True)


def test_sample_address_book_is_consistent() -> None:
    book = get_sample_address_book()
    assert len(book.get_person_list()) == 4
    for company in book.get_company_list():
        for person in company.persons:
            assert book.has_person(person)
