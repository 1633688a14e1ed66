from dataclasses import dataclass

import pytest

from vuelos.hash_table import HashMap

MISSING = "La clave no pertenece al diccionario"
EXHAUSTED = "El iterador termino de iterar"


@dataclass(frozen=True)
class Basic:
    a: str
    b: int


@dataclass(frozen=True)
class Advanced:
    w: int
    x: Basic
    y: Basic
    z: str


def _filled(pairs):
    dic = HashMap()
    for key, value in pairs:
        dic.put(key, value)
    return dic


def _assert_missing(dic, *keys):
    for key in keys:
        assert not dic.contains(key)
        for operation in (dic.get, dic.delete):
            with pytest.raises(KeyError, match=MISSING):
                operation(key)


def _assert_exhausted(it):
    assert not it.has_next()
    for operation in (it.current, it.advance):
        with pytest.raises(IndexError, match=EXHAUSTED):
            operation()


def _product(dic):
    acc = [1]

    def visit(_key, value):
        acc[0] *= value
        return True

    dic.iterate(visit)
    return acc[0]


ANIMALS = ["Gato", "Perro", "Vaca"]
SOUNDS = ["miau", "guau", "moo"]


def test_empty_map():
    dic = HashMap()
    assert len(dic) == 0
    _assert_missing(dic, "A")


@pytest.mark.parametrize("key", ["", 0])
def test_default_keys_absent(key):
    _assert_missing(HashMap(), key)


def test_one_element():
    dic = _filled([("A", 10)])
    assert len(dic) == 1
    assert dic.get("A") == 10
    _assert_missing(dic, "B")


def test_put_several():
    dic = HashMap()
    for count, (key, value) in enumerate(zip(ANIMALS, SOUNDS), start=1):
        assert not dic.contains(key)
        dic.put(key, value)
        assert len(dic) == count
        stored = ANIMALS[:count]
        assert all(dic.contains(k) for k in stored)
        assert [dic.get(k) for k in stored] == SOUNDS[:count]


def test_replace_value():
    dic = _filled([("Gato", "miau"), ("Perro", "guau")])
    assert (dic.get("Gato"), dic.get("Perro")) == ("miau", "guau")
    dic.put("Gato", "miu")
    dic.put("Perro", "baubau")
    assert len(dic) == 2
    assert (dic.get("Gato"), dic.get("Perro")) == ("miu", "baubau")


def test_replace_many_values():
    dic = _filled((i, i) for i in range(500))
    for i in range(500):
        dic.put(i, 2 * i)
    assert all(dic.get(i) == 2 * i for i in range(500))
    assert len(dic) == 500


def test_delete():
    dic = _filled(zip(ANIMALS, SOUNDS))
    remaining = 3
    for index in (2, 0, 1):
        assert dic.contains(ANIMALS[index])
        assert dic.delete(ANIMALS[index]) == SOUNDS[index]
        remaining -= 1
        assert len(dic) == remaining
        _assert_missing(dic, ANIMALS[index])


def test_reuse_deleted_slot():
    dic = _filled([("hola", "mundo!")])
    dic.delete("hola")
    assert len(dic) == 0
    assert not dic.contains("hola")
    dic.put("hola", "mundooo!")
    assert len(dic) == 1
    assert dic.get("hola") == "mundooo!"


def test_numeric_keys():
    dic = _filled([(10, "Gatito")])
    assert len(dic) == 1
    assert dic.get(10) == "Gatito"
    assert dic.delete(10) == "Gatito"
    assert not dic.contains(10)


def test_struct_keys():
    a1 = Advanced(10, Basic("mundo", 8), Basic("!", 10), "hola")
    a2 = Advanced(10, Basic("odnum", 14), Basic("!", 5), "aloh")
    a3 = Advanced(10, Basic("world", 8), Basic("!", 4), "hello")
    dic = _filled([(a1, 0), (a2, 1), (a3, 2)])
    assert (dic.get(a1), dic.get(a2), dic.get(a3)) == (0, 1, 2)
    dic.put(a1, 5)
    assert (dic.get(a1), dic.get(a3)) == (5, 2)
    assert dic.delete(a1) == 5
    assert not dic.contains(a1)
    assert dic.get(a3) == 2


def test_empty_string_key():
    dic = _filled([("", "")])
    assert dic.contains("")
    assert len(dic) == 1
    assert dic.get("") == ""


def test_none_value():
    dic = _filled([("Pez", None)])
    assert dic.contains("Pez")
    assert len(dic) == 1
    assert dic.get("Pez") is None
    assert dic.delete("Pez") is None
    assert not dic.contains("Pez")


def test_long_keys():
    template = "{}" + "~" * 120
    values = list("ABCDEFGHIJ")
    keys = [template.format(i) for i in range(10)]
    dic = _filled(zip(keys, values))
    assert len(dic) == 10
    assert [dic.get(k) for k in keys] == values


def test_put_and_delete_repeatedly():
    dic = HashMap()
    for i in range(1000):
        dic.put(i, i)
        assert dic.contains(i)
        dic.delete(i)
        assert not dic.contains(i)
    assert len(dic) == 0


def test_iterate_keys_once_each():
    dic = _filled((k, None) for k in ANIMALS)
    seen = []
    dic.iterate(lambda k, v: seen.append(k) or True)
    assert sorted(seen) == sorted(ANIMALS)


def test_iterate_values():
    dic = _filled([("Gato", 6), ("Perro", 2), ("Vaca", 3), ("Burrito", 4), ("Hamster", 5)])
    assert _product(dic) == 720


def test_iterate_values_with_deleted():
    dic = _filled([("Elefante", 7), ("Gato", 6), ("Perro", 2), ("Vaca", 3),
                   ("Burrito", 4), ("Hamster", 5)])
    dic.delete("Elefante")
    assert _product(dic) == 720


@pytest.mark.parametrize("n", [1000, 5000])
def test_volume(n):
    keys = [f"{i:08d}" for i in range(n)]
    dic = _filled((k, i) for i, k in enumerate(keys))
    assert len(dic) == n
    assert all(dic.contains(k) and dic.get(k) == i for i, k in enumerate(keys))
    for i, k in enumerate(keys):
        assert dic.delete(k) == i
        assert not dic.contains(k)
    assert len(dic) == 0


def test_shrinking_keeps_remaining_entries():
    dic = _filled((i, str(i)) for i in range(1000))
    for i in range(950):
        dic.delete(i)
    assert len(dic) == 50
    assert all(dic.get(i) == str(i) for i in range(950, 1000))
    assert not dic.contains(10)


def test_iterator_on_empty():
    _assert_exhausted(HashMap().iterator())


def test_iterator_walk():
    dic = _filled(zip(ANIMALS, SOUNDS))
    it = dic.iterator()
    seen = []
    for _ in range(3):
        assert it.has_next()
        key, value = it.current()
        assert SOUNDS[ANIMALS.index(key)] == value
        seen.append(key)
        it.advance()
    assert sorted(seen) == sorted(ANIMALS)
    _assert_exhausted(it)


def test_iterator_not_reaching_end():
    dic = _filled((k, "") for k in "ABC")
    dic.iterator()
    it2 = dic.iterator()
    it2.advance()
    it3 = dic.iterator()
    seen = []
    for _ in range(3):
        seen.append(it3.current()[0])
        it3.advance()
    assert not it3.has_next()
    assert sorted(seen) == ["A", "B", "C"]


def test_iterator_after_deletions():
    dic = _filled((k, "") for k in ANIMALS)
    for k in ANIMALS:
        dic.delete(k)
    _assert_exhausted(dic.iterator())
    dic.put("Gato", "A")
    it = dic.iterator()
    assert it.has_next()
    assert it.current() == ("Gato", "A")
    it.advance()
    assert not it.has_next()


def test_iterator_volume():
    n = 5000
    keys = [f"{i:08d}" for i in range(n)]
    dic = _filled((k, i) for i, k in enumerate(keys))
    it = dic.iterator()
    seen = {}
    while it.has_next():
        key, value = it.current()
        seen[key] = value
        it.advance()
    assert seen == {k: i for i, k in enumerate(keys)}


def test_iterate_stops_when_visit_returns_false():
    dic = _filled((i, i) for i in range(10000))
    state = {"keep_going": True, "ran_after_stop": False}
    visited = []

    def visit(key, _value):
        visited.append(key)
        if not state["keep_going"]:
            state["ran_after_stop"] = True
            return False
        if key % 100 == 0:
            state["keep_going"] = False
            return False
        return True

    dic.iterate(visit)
    assert state["keep_going"] is False
    assert state["ran_after_stop"] is False
    assert visited[-1] % 100 == 0
    assert len(dic) == 10000
    assert (dic.get(0), dic.get(9999)) == (0, 9999)


def test_dunder_contains_and_iter():
    dic = _filled([("x", 1), ("y", 2)])
    assert "x" in dic
    assert "z" not in dic
    assert sorted(dic) == [("x", 1), ("y", 2)]