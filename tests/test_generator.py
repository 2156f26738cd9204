import numpy as np
import pytest

from newsbabble.errors import EmptyModelError
from newsbabble.generator import Generator, NumpyRandomSource
from newsbabble.ingest import build_model
from newsbabble.model import ChainModel
from newsbabble.tokenizer import tokenize_text


def test_first_choice_reproduces_first_unit(two_unit_model: ChainModel, first_choice) -> None:
    generator = Generator(two_unit_model, first_choice)
    assert generator.generate_one() == ["a", "b", "a"]
    assert first_choice.bounds == [2, 2, 2, 1]


def test_draw_selects_later_edge(two_unit_model: ChainModel, scripted) -> None:
    generator = Generator(two_unit_model, scripted([0, 0, 1]))
    assert generator.generate_one() == ["a", "b", "c"]


def test_sequences_are_independent(two_unit_model: ChainModel, scripted) -> None:
    source = scripted([0, 0, 1, 0])
    generator = Generator(two_unit_model, source)
    assert list(generator.generate(2)) == [["a", "b", "c"], ["a", "b", "a"]]
    assert source.bounds[4] == 2


def test_empty_unit_generates_nothing(first_choice) -> None:
    model = build_model([[]])
    assert Generator(model, first_choice).generate_one() == []


def test_generation_without_input_fails(first_choice) -> None:
    with pytest.raises(EmptyModelError):
        Generator(ChainModel(), first_choice).generate_one()


def test_weight_bound_matches_chain_total(two_unit_model: ChainModel, scripted) -> None:
    source = scripted([1, 1, 1])
    Generator(two_unit_model, source).generate_one()
    assert source.bounds[0] == two_unit_model.start.total
    assert source.bounds[1:] == [2, 2, 1]


def test_seeded_walks_terminate_within_model_size(two_unit_model: ChainModel) -> None:
    generator = Generator(two_unit_model, NumpyRandomSource(seed=1234))
    for words in generator.generate(200):
        assert 1 <= len(words) <= len(two_unit_model.pairs)
        assert words in (["a", "b", "a"], ["a", "b", "c"])


def test_seeded_output_is_reproducible() -> None:
    text = "one way to go is the way to go home\n\nthe way home is long\n"
    model = build_model([tokenize_text(text), tokenize_text("go home one way")])
    first = list(Generator(model, NumpyRandomSource(seed=42)).generate(5))
    second = list(Generator(model, NumpyRandomSource(seed=42)).generate(5))
    assert first == second
    vocabulary = set(model.tokens)
    assert all(word in vocabulary for words in first for word in words)


def test_numpy_source_respects_bound() -> None:
    source = NumpyRandomSource(rng=np.random.default_rng(0))
    draws = {source.randbelow(3) for _ in range(100)}
    assert draws == {0, 1, 2}
    with pytest.raises(ValueError):
        source.randbelow(0)


def test_seed_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEWSBABBLE_SEED", "babble")
    first = [NumpyRandomSource().randbelow(1000) for _ in range(3)]
    second = [NumpyRandomSource().randbelow(1000) for _ in range(3)]
    assert first == second
