from .model import (
    InvalidArgumentError,
    MarkovModel,
    build_markov_model,
    sanitize_text,
)
from .markov_chain import Builder, MarkovText, of_length

__all__ = [
    "Builder",
    "InvalidArgumentError",
    "MarkovModel",
    "MarkovText",
    "build_markov_model",
    "of_length",
    "sanitize_text",
]
