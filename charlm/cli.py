"""
Command-line entry point: trains a model on a corpus file and prints the
generated text.

    charlm WINDOW_LENGTH INITIAL_TEXT LENGTH MODE CORPUS

MODE "random" seeds the generator from the operating system; any other value
uses a fixed seed so repeated runs print the same text.
"""
import logging
from pathlib import Path

import click

from . import config
from .language_model import LanguageModel


@click.command()
@click.argument('window_length', type=click.IntRange(min=1))
@click.argument('initial_text')
@click.argument('length', type=click.IntRange(min=0))
@click.argument('mode')
@click.argument('corpus', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--show-model', is_flag=True, help="Print the trained table instead of generating text.")
@click.option('--progress/--no-progress', default=config.SHOW_PROGRESS, help="Show a progress bar while training.")
@click.option('--encoding', default=config.CORPUS_ENCODING, show_default=True, help="Encoding of the corpus file.")
@click.option('--verbose', '-v', is_flag=True, help="Log training details to stderr.")
def main(window_length, initial_text, length, mode, corpus, show_model, progress, encoding, verbose):
    """Generate LENGTH characters after INITIAL_TEXT from a model trained on CORPUS."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format=config.LOG_FORMAT)

    seed = None if mode == config.RANDOM_MODE else config.DEFAULT_SEED
    model = LanguageModel(window_length, seed=seed)
    model.train_file(corpus, encoding=encoding, show_progress=progress)

    if show_model:
        click.echo(str(model))
        return

    click.echo(model.generate(initial_text, length))


if __name__ == '__main__':
    main()
