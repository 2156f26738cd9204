from newsbabble.interner import TokenInterner


def test_intern_is_idempotent() -> None:
    interner = TokenInterner()
    first = interner.intern("was")
    assert interner.intern("was") == first
    assert interner.intern("".join(["w", "a", "s"])) == first


def test_distinct_text_gets_distinct_ids() -> None:
    interner = TokenInterner()
    ids = {interner.intern(text) for text in ["a", "b", "A", "a ", "\n"]}
    assert len(ids) == 5
    assert len(interner) == 5


def test_text_round_trip_and_counters() -> None:
    interner = TokenInterner()
    for word in "the cat saw the dog".split():
        interner.intern(word)
    assert interner.lookups == 5
    assert len(interner) == 4
    assert interner.text(interner.intern("dog")) == "dog"
    assert list(interner) == ["the", "cat", "saw", "dog"]


def test_lookup_does_not_intern() -> None:
    interner = TokenInterner()
    assert interner.lookup("missing") is None
    assert "missing" not in interner
    assert len(interner) == 0


def test_clear_drops_everything() -> None:
    interner = TokenInterner()
    interner.intern("x")
    interner.clear()
    assert len(interner) == 0
    assert interner.lookups == 0
