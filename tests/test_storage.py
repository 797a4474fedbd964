import pytest

from langstore.models import Language, Programmer
from langstore.storage import MemoryStorage, Storage


@pytest.fixture
def storage():
    return MemoryStorage(
        languages=[
            Language(1, "C", "compiled", "Ritchie"),
            Language(4, "Python", "interpreted", "Rossum"),
        ],
        programmers=[Programmer(2, "Ann", "senior", "01.09.2015")],
    )


def test_storage_is_abstract():
    with pytest.raises(TypeError):
        Storage()


def test_get_all_languages(storage):
    names = [lang.name for lang in storage.get_all_languages()]
    assert names == ["C", "Python"]


def test_get_language_by_id(storage):
    assert storage.get_language_by_id(4) == Language(4, "Python", "interpreted", "Rossum")
    assert storage.get_language_by_id(99) is None


def test_returned_records_are_copies(storage):
    storage.get_all_languages()[0].name = "changed"
    found = storage.get_language_by_id(1)
    found.name = "changed"
    assert storage.get_language_by_id(1).name == "C"


def test_insert_language_uses_max_id_plus_one(storage):
    new_id = storage.insert_language(Language(id=77, name="Go"))
    assert new_id == 5
    assert storage.get_language_by_id(5).name == "Go"
    assert storage.get_language_by_id(77) is None


def test_insert_into_empty_storage_starts_at_one():
    storage = MemoryStorage()
    assert storage.insert_language(Language(name="C")) == 1
    assert storage.insert_language(Language(name="Go")) == 2
    assert storage.insert_programmer(Programmer(name="Ann")) == 1


def test_insert_ignores_negative_ids():
    storage = MemoryStorage(languages=[Language(-5, "odd")])
    assert storage.insert_language(Language(name="C")) == 1


def test_update_language(storage):
    storage.update_language(Language(1, "C89", "compiled", "K&R"))
    assert storage.get_language_by_id(1) == Language(1, "C89", "compiled", "K&R")
    assert len(storage.get_all_languages()) == 2


def test_update_unknown_language_changes_nothing(storage):
    before = storage.get_all_languages()
    storage.update_language(Language(50, "Nope"))
    assert storage.get_all_languages() == before


def test_remove_language(storage):
    assert storage.remove_language(1) is True
    assert storage.get_language_by_id(1) is None
    assert storage.remove_language(1) is False


def test_remove_takes_last_duplicate():
    storage = MemoryStorage(languages=[Language(3, "first"), Language(3, "second")])
    assert storage.remove_language(3) is True
    assert [lang.name for lang in storage.get_all_languages()] == ["first"]


def test_programmer_crud(storage):
    new_id = storage.insert_programmer(Programmer(name="Bob", stage="junior"))
    assert new_id == 3
    storage.update_programmer(Programmer(new_id, "Bob", "middle", "01.01.2020"))
    assert storage.get_programmer_by_id(new_id).stage == "middle"
    assert storage.remove_programmer(2) is True
    assert [p.id for p in storage.get_all_programmers()] == [new_id]
    assert storage.get_programmer_by_id(2) is None
    assert storage.remove_programmer(2) is False


def test_constructor_copies_input():
    lang = Language(1, "C")
    storage = MemoryStorage(languages=[lang])
    lang.name = "changed"
    assert storage.get_language_by_id(1).name == "C"


def test_load_and_save_keep_records(storage):
    before = storage.get_all_languages()
    storage.save()
    storage.load()
    assert storage.get_all_languages() == before