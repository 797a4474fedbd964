import pytest

from langstore.csv_storage import CsvStorage
from langstore.models import Language, Programmer


def _write(directory, lang_text, prog_text):
    (directory / "lang.csv").write_text(lang_text, encoding="utf-8")
    (directory / "prog.csv").write_text(prog_text, encoding="utf-8")


def test_load_reads_both_files(tmp_path):
    _write(tmp_path, "1,C,compiled,Ritchie\n2,Lisp,functional,McCarthy\n",
           "3,Ann,senior,01.09.2015\n")
    storage = CsvStorage(tmp_path)
    storage.load()
    assert storage.get_all_languages() == [
        Language(id=1, name="C", type="compiled", author="Ritchie"),
        Language(id=2, name="Lisp", type="functional", author="McCarthy"),
    ]
    assert storage.get_all_programmers() == [
        Programmer(id=3, name="Ann", stage="senior", date_of_start="01.09.2015")
    ]


def test_last_line_without_newline_is_read(tmp_path):
    _write(tmp_path, "1,C,compiled,Ritchie\n2,Go,compiled,Pike", "")
    storage = CsvStorage(tmp_path)
    storage.load()
    assert [lang.name for lang in storage.get_all_languages()] == ["C", "Go"]
    assert storage.get_all_programmers() == []


def test_id_keeps_leading_digits(tmp_path):
    _write(tmp_path, "7abc,C,compiled,Ritchie\n", "")
    storage = CsvStorage(tmp_path)
    storage.load()
    assert storage.get_all_languages()[0].id == 7


def test_non_numeric_id_raises(tmp_path):
    _write(tmp_path, "x,C,compiled,Ritchie\n", "")
    with pytest.raises(ValueError):
        CsvStorage(tmp_path).load()


def test_short_row_raises(tmp_path):
    _write(tmp_path, "1,C\n", "")
    with pytest.raises(ValueError):
        CsvStorage(tmp_path).load()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CsvStorage(tmp_path).load()


def test_save_writes_rows_without_trailing_newline(tmp_path):
    storage = CsvStorage(tmp_path)
    storage.insert_language(Language(name="C", type="compiled", author="Ritchie"))
    storage.insert_language(Language(name="Go", type="compiled", author="Pike"))
    storage.insert_programmer(Programmer(name="Ann", stage="senior", date_of_start="01.09.2015"))
    storage.save()
    assert (tmp_path / "lang.csv").read_text(encoding="utf-8") == (
        "1,C,compiled,Ritchie\n2,Go,compiled,Pike"
    )
    assert (tmp_path / "prog.csv").read_text(encoding="utf-8") == "1,Ann,senior,01.09.2015"


def test_save_then_load_round_trip(tmp_path):
    first = CsvStorage(tmp_path)
    first.insert_language(Language(name="Rust", type="compiled", author="Hoare"))
    first.insert_programmer(Programmer(name="Bob", stage="junior", date_of_start="02.02.2020"))
    first.save()
    second = CsvStorage(tmp_path)
    second.load()
    assert second.get_all_languages() == first.get_all_languages()
    assert second.get_all_programmers() == first.get_all_programmers()


def test_insert_after_load_uses_next_id(tmp_path):
    _write(tmp_path, "4,C,compiled,Ritchie\n2,Go,compiled,Pike\n", "")
    storage = CsvStorage(tmp_path)
    storage.load()
    new_id = storage.insert_language(Language(name="D"))
    assert new_id == 5
    assert storage.get_language_by_id(new_id).name == "D"


def test_empty_storage_saves_empty_files(tmp_path):
    CsvStorage(tmp_path).save()
    assert (tmp_path / "lang.csv").read_text(encoding="utf-8") == ""
    reloaded = CsvStorage(tmp_path)
    reloaded.load()
    assert reloaded.get_all_languages() == []