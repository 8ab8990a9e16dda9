import random
from pathlib import Path

import pytest

from markovtext import config
from markovtext.markov_chain import InvalidArgumentError, MarkovText, build_markov_model, of_length

# One even and one odd length keep the output odd-length while it is being
# built, which exercises truncation to even requested lengths.
PREFIX_LENGTH = 7
SUFFIX_LENGTH = 2

# Seed 321 on res/alice_opening.txt. Any change to sanitization, key order or
# draw order changes this text.
OUTPUT_OF_LENGTH_60 = " There was nothing to do: once or twice she had peeped into "


@pytest.fixture
def alice_builder():
    return (
        MarkovText.from_file('alice_opening.txt')
        .with_prefix_length(PREFIX_LENGTH)
        .with_suffix_length(SUFFIX_LENGTH)
        .with_seed(321)
    )


@pytest.fixture(autouse=True)
def resource_dir(monkeypatch):
    monkeypatch.setattr(config, 'RESOURCE_DIR', Path(__file__).resolve().parents[1] / 'res')


def test_from_raw_text_rejects_none():
    with pytest.raises(InvalidArgumentError):
        MarkovText.from_raw_text(None)


def test_from_file_rejects_none():
    with pytest.raises(InvalidArgumentError):
        MarkovText.from_file(None)


@pytest.mark.parametrize("value", [0, -17, True])
def test_with_prefix_length_rejects_non_positive(alice_builder, value):
    with pytest.raises(InvalidArgumentError):
        MarkovText.from_raw_text("abc").with_prefix_length(value)
    with pytest.raises(InvalidArgumentError):
        alice_builder.with_prefix_length(value)
    assert alice_builder.prefix_length == PREFIX_LENGTH


@pytest.mark.parametrize("value", [0, -101, False])
def test_with_suffix_length_rejects_non_positive(alice_builder, value):
    with pytest.raises(InvalidArgumentError):
        MarkovText.from_raw_text("abc").with_suffix_length(value)
    with pytest.raises(InvalidArgumentError):
        alice_builder.with_suffix_length(value)
    assert alice_builder.suffix_length == SUFFIX_LENGTH


def test_builder_defaults():
    builder = MarkovText.from_raw_text("abc")

    assert builder.prefix_length == 1
    assert builder.suffix_length == 1
    assert builder.seed is None


def test_of_length_rejects_negative_length():
    markov_text = MarkovText.from_raw_text("abcabc").build()

    with pytest.raises(InvalidArgumentError):
        markov_text.of_length(-1)
    with pytest.raises(InvalidArgumentError):
        markov_text.of_length(True)


def test_walk_follows_scripted_draws(scripted_random):
    model = build_markov_model("abcabd", 1, 1)
    rng = scripted_random([1, 0, 0, 1, 1])

    assert of_length(model, rng, 5) == "bcabd"
    # One draw over the 3 distinct prefixes, then one per appended suffix.
    assert rng.calls == [3, 2, 1, 2, 2]
    assert rng.draws == []


def test_output_is_truncated_when_last_suffix_overshoots(scripted_random):
    model = build_markov_model("xyzxyz", 2, 2)
    rng = scripted_random([0, 0, 0])

    assert of_length(model, rng, 5) == "xyzxy"
    assert rng.draws == []


def test_start_prefix_is_drawn_among_distinct_prefixes(scripted_random):
    # "a" occurs three times but is a single candidate for the start.
    model = build_markov_model("ababab", 1, 1)
    rng = scripted_random([1])

    assert of_length(model, rng, 1) == "b"
    assert rng.calls == [2]


def test_empty_model_produces_empty_text(scripted_random):
    model = build_markov_model("ab", 2, 1)
    rng = scripted_random([])

    assert of_length(model, rng, 10) == ""
    assert rng.calls == []


def test_of_length_produces_expected_result(alice_builder):
    assert alice_builder.build().of_length(60) == OUTPUT_OF_LENGTH_60


def test_longer_output_extends_the_expected_result(alice_builder):
    # A longer walk makes the same draws first, so it shares the shorter output.
    output = alice_builder.build().of_length(250)

    assert len(output) == 250
    assert output.startswith(OUTPUT_OF_LENGTH_60)


def test_of_length_zero_is_empty(alice_builder):
    assert alice_builder.build().of_length(0) == ""


@pytest.mark.parametrize("length", [250, 784, 987])
def test_of_length_is_the_requested_length(alice_builder, length):
    assert len(alice_builder.build().of_length(length)) == length


def test_of_length_when_value_is_less_than_prefix_length(alice_builder):
    assert len(alice_builder.build().of_length(PREFIX_LENGTH - 1)) == PREFIX_LENGTH - 1


def test_of_length_when_value_is_less_than_suffix_length(alice_builder):
    assert len(alice_builder.build().of_length(SUFFIX_LENGTH - 1)) == SUFFIX_LENGTH - 1


def test_of_length_produces_output_even_when_raw_text_is_short():
    # "abc" is totally ordered, so the only possible outputs are "abc" and "bc".
    result = MarkovText.from_raw_text("abc").with_seed(0).build().of_length(1000)

    assert len(result) < 4
    assert result in ("abc", "bc")


def test_same_seed_gives_same_sequence_of_outputs(alice_builder):
    first = alice_builder.build()
    second = alice_builder.build()

    assert [first.of_length(250) for _ in range(3)] == [second.of_length(250) for _ in range(3)]


def test_random_source_advances_across_calls(alice_builder):
    markov_text = alice_builder.build()
    expected = random.Random(321)

    first = markov_text.of_length(250)
    assert of_length(markov_text.model, expected, 250) == first
    assert markov_text.of_length(250) == of_length(markov_text.model, expected, 250)


def test_generated_text_only_contains_observed_transitions(alice_builder):
    markov_text = alice_builder.build()
    output = markov_text.of_length(500)
    model = markov_text.model

    assert output[:PREFIX_LENGTH] in model
    for i in range(PREFIX_LENGTH, len(output) - SUFFIX_LENGTH + 1, SUFFIX_LENGTH):
        prefix = output[i - PREFIX_LENGTH:i]
        assert output[i:i + SUFFIX_LENGTH] in model.suffixes(prefix)


def test_from_file_propagates_missing_file(tmp_path):
    builder = MarkovText.from_file(tmp_path / 'missing.txt')

    with pytest.raises(FileNotFoundError):
        builder.build()


def test_each_build_gets_a_fresh_random_source(alice_builder):
    assert alice_builder.build().random is not alice_builder.build().random
