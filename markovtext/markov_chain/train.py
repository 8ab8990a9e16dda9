import argparse
import logging
import sys

from .. import config
from .markov_chain import MarkovText
from .model import InvalidArgumentError


def main(argv=None):
    parser = argparse.ArgumentParser(description="Build a character-level Markov model from a corpus and report its statistics.")
    parser.add_argument('corpus', help='Corpus file, relative to the resource directory unless absolute')
    parser.add_argument('--prefix-length', type=int, default=config.DEFAULT_PREFIX_LENGTH, help='Number of characters in each prefix')
    parser.add_argument('--suffix-length', type=int, default=config.DEFAULT_SUFFIX_LENGTH, help='Number of characters in each suffix')
    parser.add_argument('--workers', type=int, default=config.NUM_WORKERS, help='Worker processes used to scan the corpus')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        markov_text = (
            MarkovText.from_file(args.corpus)
            .with_prefix_length(args.prefix_length)
            .with_suffix_length(args.suffix_length)
            .with_workers(args.workers)
            .build()
        )
    except InvalidArgumentError as e:
        parser.error(str(e))
    except OSError as e:
        logging.error(f"Error reading corpus: {e}")
        sys.exit(1)

    print(f"Markov model (prefix {args.prefix_length}, suffix {args.suffix_length}) statistics:")
    for key, value in markov_text.model.stats().items():
        print(f"  {key}: {value}")


if __name__ == '__main__':
    main()
