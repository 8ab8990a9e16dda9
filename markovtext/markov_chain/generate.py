"""
A command-line script that builds a Markov model from a corpus and prints
generated text.

The corpus is either a file (resolved against the resource directory when the
path is relative) or raw text given with --text.
"""
import logging
import sys
from pathlib import Path

import click

from .. import config
from .markov_chain import MarkovText
from .model import InvalidArgumentError


@click.command()
@click.argument('corpus', required=False)
@click.option('--text', 'raw_text', default=None, help="Use this text as the corpus instead of a file.")
@click.option('--prefix-length', '-p', type=int, default=config.DEFAULT_PREFIX_LENGTH, show_default=True,
              help="Number of characters in each prefix.")
@click.option('--suffix-length', '-s', type=int, default=config.DEFAULT_SUFFIX_LENGTH, show_default=True,
              help="Number of characters in each suffix.")
@click.option('--length', '-n', type=int, default=config.DEFAULT_OUTPUT_LENGTH, show_default=True,
              help="Maximum length of the generated text.")
@click.option('--seed', type=int, default=None, help="Random seed for reproducible output.")
@click.option('--workers', type=int, default=config.NUM_WORKERS, show_default=True,
              help="Worker processes used to scan the corpus.")
@click.option('--output', '-o', 'output_file', type=click.Path(dir_okay=False, writable=True, path_type=Path),
              help="Save the generated text to this file instead of printing it.")
@click.option('--verbose', '-v', is_flag=True, help="Enable debug logging.")
def main(corpus, raw_text, prefix_length, suffix_length, length, seed, workers, output_file, verbose):
    """
    Generates text of at most LENGTH characters that mimics CORPUS.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    if (corpus is None) == (raw_text is None):
        raise click.UsageError("Provide exactly one of CORPUS or --text.")

    try:
        builder = MarkovText.from_file(corpus) if raw_text is None else MarkovText.from_raw_text(raw_text)
        markov_text = (
            builder.with_prefix_length(prefix_length)
            .with_suffix_length(suffix_length)
            .with_seed(seed)
            .with_workers(workers)
            .build()
        )
        generated = markov_text.of_length(length)
    except InvalidArgumentError as e:
        logging.error(f"Invalid argument: {e}")
        sys.exit(2)
    except OSError as e:
        logging.error(f"Error reading corpus: {e}")
        sys.exit(1)

    if len(generated) < length:
        logging.warning(f"Corpus only produced {len(generated)} of {length} requested characters.")

    if output_file:
        output_file.write_text(generated + '\n', encoding='utf-8')
        logging.info(f"Saved generated text to {output_file}")
    else:
        click.echo(generated)


if __name__ == '__main__':
    main()
