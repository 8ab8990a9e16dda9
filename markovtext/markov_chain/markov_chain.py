"""
Character-level Markov text generation.

Given an input text, a prefix length and a suffix length, every contiguous
prefix of the text is mapped to the suffixes that immediately follow it. Output
is generated by picking a random prefix, then repeatedly appending a random
suffix of the current prefix and taking the last `prefix_length` characters of
the output as the next prefix, until the requested length is reached.

Short input texts often cannot produce output of the requested length; in that
case the walk stops early and the shorter text is returned.

Instances should be created with a Builder, for example:

    hamlet = (
        MarkovText.from_file("hamlet.txt")
        .with_prefix_length(7)
        .with_suffix_length(4)
        .build()
    )
    print(hamlet.of_length(1000))
"""
import logging
import random

from .. import config
from ..sources import read_file, read_raw_text
from .model import InvalidArgumentError, build_markov_model, check_positive

logger = logging.getLogger(__name__)


def _random_element(sequence, rng):
    """Returns a random element of `sequence`, or None if it is empty."""
    if not sequence:
        return None
    return sequence[rng.randrange(len(sequence))]


def of_length(model, rng, length):
    """
    Random-walks `model` and returns text of at most `length` characters.

    Exactly one draw from `rng` selects the starting prefix (uniformly among
    distinct prefixes), then one draw per appended suffix.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise InvalidArgumentError(f"length must be a non-negative integer, got {length!r}.")

    prefix = _random_element(model.prefixes, rng)
    if prefix is None:
        return ""
    output = prefix

    while len(output) < length:
        suffix = _random_element(model.suffixes(prefix), rng)
        if suffix is None:
            logger.debug(f"Walk reached a dead end at {len(output)} of {length} characters.")
            break
        output += suffix
        prefix = output[-model.prefix_length:]

    return output[:length]


class MarkovText:
    """Generates text from a MarkovModel using a random source it owns."""

    def __init__(self, model, rng):
        self.model = model
        self.random = rng

    def of_length(self, length):
        """Generates text of length <= `length`."""
        return of_length(self.model, self.random, length)

    @staticmethod
    def from_raw_text(raw_text):
        """Returns a new Builder using `raw_text` as the corpus."""
        return Builder(raw_text, read_raw_text)

    @staticmethod
    def from_file(filename):
        """Returns a new Builder reading the corpus from `filename`."""
        return Builder(filename, read_file)


class Builder:
    """
    Collects the parameters for a MarkovText. Create one with
    MarkovText.from_raw_text or MarkovText.from_file.
    """

    def __init__(self, raw_text_or_filename, source):
        if raw_text_or_filename is None:
            raise InvalidArgumentError("raw text or filename must not be None.")
        if source is None:
            raise InvalidArgumentError("source must not be None.")
        self.raw_text_or_filename = raw_text_or_filename
        self.source = source
        self.prefix_length = config.DEFAULT_PREFIX_LENGTH
        self.suffix_length = config.DEFAULT_SUFFIX_LENGTH
        self.seed = None
        self.num_workers = config.NUM_WORKERS

    def with_prefix_length(self, prefix_length):
        """
        Must be > 0. A larger value makes the output resemble the input more
        closely.
        """
        self.prefix_length = check_positive(prefix_length, "prefix_length")
        return self

    def with_suffix_length(self, suffix_length):
        """Must be > 0."""
        self.suffix_length = check_positive(suffix_length, "suffix_length")
        return self

    def with_seed(self, seed):
        self.seed = seed
        return self

    def with_workers(self, num_workers):
        self.num_workers = check_positive(num_workers, "num_workers")
        return self

    def build(self):
        """Acquires the corpus and returns a new MarkovText with a fresh random source."""
        raw_text = self.source(self.raw_text_or_filename)
        model = build_markov_model(raw_text, self.prefix_length, self.suffix_length, self.num_workers)
        rng = random.Random(self.seed) if self.seed is not None else random.Random()
        return MarkovText(model, rng)
