import pytest

from objectdi.collection import ObjectsCollection


class Item:
    pass


@pytest.fixture
def source():
    return [Item(), Item(), Item()]


def test_iterates_in_order(source):
    collection = ObjectsCollection(source)
    assert len(collection) == len(source)
    for got, expected in zip(collection, source):
        assert got is expected


def test_to_list_matches_source(source):
    collection = ObjectsCollection(source)
    result = collection.to_list()
    assert len(result) == len(collection)
    assert all(a is b for a, b in zip(result, source))


def test_to_list_returns_independent_copy(source):
    collection = ObjectsCollection(source)
    result = collection.to_list()
    result.clear()
    assert len(collection.to_list()) == len(source)


def test_source_mutation_does_not_affect_collection(source):
    collection = ObjectsCollection(source)
    source.append(Item())
    assert len(collection) == len(source) - 1


def test_default_collection_is_invalid_and_empty():
    collection = ObjectsCollection()
    assert collection.is_valid() is False
    assert len(collection) == 0
    assert collection.to_list() == []


def test_empty_but_given_collection_is_valid():
    collection = ObjectsCollection([])
    assert collection.is_valid() is True
    assert len(collection) == 0


def test_accepts_generator(source):
    collection = ObjectsCollection(x for x in source)
    assert collection.is_valid()
    assert collection.to_list() == source
    # iterating twice gives the same objects
    assert list(collection) == list(collection)