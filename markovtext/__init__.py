from .markov_chain import (
    Builder,
    InvalidArgumentError,
    MarkovModel,
    MarkovText,
    build_markov_model,
    of_length,
    sanitize_text,
)

__all__ = [
    "Builder",
    "InvalidArgumentError",
    "MarkovModel",
    "MarkovText",
    "build_markov_model",
    "of_length",
    "sanitize_text",
]
