import logging
import re
from collections.abc import Mapping
from concurrent.futures import ProcessPoolExecutor, as_completed
from types import MappingProxyType

from tqdm import tqdm

from .. import config

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


class InvalidArgumentError(ValueError):
    """Raised when a caller supplies an argument outside its allowed range."""


def check_positive(value, name):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}.")
    return value


def sanitize_text(text):
    """Collapses every run of whitespace into a single space. Nothing is trimmed."""
    return _WHITESPACE_RUN.sub(" ", text)


class MarkovModel(Mapping):
    """
    An immutable map from each prefix of the corpus to the suffixes observed
    right after it.

    Every occurrence of a prefix contributes one entry to its suffix tuple, in
    the order the occurrences appear in the text, so repeated suffixes encode
    transition frequencies. Keys iterate in order of first occurrence.
    """

    def __init__(self, transitions, prefix_length, suffix_length):
        self.prefix_length = prefix_length
        self.suffix_length = suffix_length
        self._transitions = MappingProxyType(
            {prefix: tuple(suffixes) for prefix, suffixes in transitions.items()}
        )
        self._prefixes = tuple(self._transitions)

    def __getitem__(self, prefix):
        return self._transitions[prefix]

    def __iter__(self):
        return iter(self._prefixes)

    def __len__(self):
        return len(self._prefixes)

    def __eq__(self, other):
        if not isinstance(other, MarkovModel):
            return NotImplemented
        return (
            self.prefix_length == other.prefix_length
            and self.suffix_length == other.suffix_length
            and dict(self._transitions) == dict(other._transitions)
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"MarkovModel(prefix_length={self.prefix_length}, "
            f"suffix_length={self.suffix_length}, prefixes={len(self)})"
        )

    @property
    def prefixes(self):
        """Distinct prefixes, in order of first occurrence."""
        return self._prefixes

    def suffixes(self, prefix):
        """Returns the suffixes recorded for `prefix`, or an empty tuple."""
        return self._transitions.get(prefix, ())

    @property
    def transition_count(self):
        return sum(len(suffixes) for suffixes in self._transitions.values())

    def stats(self):
        """Return basic statistics about the model."""
        transitions = self.transition_count
        return {
            "prefixes": len(self),
            "transitions": transitions,
            "avg_suffixes_per_prefix": transitions / len(self) if self else 0.0,
        }


def _scan_windows(text, start, stop, prefix_length, suffix_length):
    """Returns the (prefix, suffix) pair at every offset in [start, stop)."""
    window = prefix_length + suffix_length
    return [
        (text[i:i + prefix_length], text[i + prefix_length:i + window])
        for i in range(start, stop)
    ]


def _scan_chunk(segment, prefix_length, suffix_length):
    """Worker function scanning one contiguous segment of the corpus."""
    window_count = len(segment) - prefix_length - suffix_length + 1
    return _scan_windows(segment, 0, window_count, prefix_length, suffix_length)


def _scan_parallel(text, window_count, prefix_length, suffix_length, num_workers):
    """
    Scans the corpus in contiguous chunks across worker processes. Chunks finish
    in any order, so results are stored by chunk index and concatenated in
    source order afterwards.
    """
    window = prefix_length + suffix_length
    chunk_size = max(1, -(-window_count // num_workers))
    bounds = [
        (start, min(start + chunk_size, window_count))
        for start in range(0, window_count, chunk_size)
    ]
    logger.debug(f"Scanning {window_count} windows in {len(bounds)} chunks with {num_workers} workers.")

    results = [None] * len(bounds)
    with ProcessPoolExecutor(max_workers=num_workers) as executor:
        future_to_index = {
            # A chunk covering offsets [start, stop) needs text up to the last window's end.
            executor.submit(_scan_chunk, text[start:stop - 1 + window], prefix_length, suffix_length): index
            for index, (start, stop) in enumerate(bounds)
        }
        for future in tqdm(as_completed(future_to_index), total=len(bounds), desc="Scanning corpus chunks"):
            results[future_to_index[future]] = future.result()

    pairs = []
    for chunk_pairs in results:
        pairs.extend(chunk_pairs)
    return pairs


def build_markov_model(text, prefix_length, suffix_length, num_workers=1):
    """
    Builds a MarkovModel from `text`.

    The text is sanitized, then a window of `prefix_length + suffix_length`
    characters slides over every offset; the leading `prefix_length`
    characters are the prefix and the rest is the suffix recorded for it.
    Text shorter than one window produces an empty model.
    """
    if text is None:
        raise InvalidArgumentError("text must not be None.")
    check_positive(prefix_length, "prefix_length")
    check_positive(suffix_length, "suffix_length")
    check_positive(num_workers, "num_workers")

    sanitized = sanitize_text(text)
    window_count = max(0, len(sanitized) - prefix_length - suffix_length + 1)

    if num_workers > 1 and window_count >= config.PARALLEL_MIN_WINDOWS:
        pairs = _scan_parallel(sanitized, window_count, prefix_length, suffix_length, num_workers)
    else:
        pairs = _scan_windows(sanitized, 0, window_count, prefix_length, suffix_length)

    transitions = {}
    for prefix, suffix in pairs:
        transitions.setdefault(prefix, []).append(suffix)

    model = MarkovModel(transitions, prefix_length, suffix_length)
    logger.info(
        f"Built Markov model from {len(sanitized)} characters: "
        f"{window_count} windows, {len(model)} distinct prefixes."
    )
    return model
