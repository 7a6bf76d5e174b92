import logging
import random
from pathlib import Path

from tqdm import tqdm

from .char_stream import CharStream
from .context_table import ContextTable
from .errors import ModelStateError
from .sampler import sample


class LanguageModel:
    """
    An order-k character-level Markov model.

    Train it once on a corpus, then call generate() as many times as needed.
    Passing a `seed` makes generation reproducible; leaving it as None seeds
    the random source from the operating system.
    """
    def __init__(self, window_length, seed=None):
        self._window_length = window_length
        self._table = ContextTable(window_length)
        self._random = random.Random(seed)
        self._trained = False

    @property
    def window_length(self):
        return self._window_length

    @property
    def table(self):
        return self._table

    @property
    def is_trained(self):
        return self._trained

    def train(self, source, show_progress=False, total=None):
        """
        Builds the model from an iterable of characters (a str, a CharStream, ...).

        A source shorter than the window length leaves the table empty.
        """
        if self._trained:
            raise ModelStateError("Model has already been trained. Create a new model to retrain.")

        chars = iter(source)
        if show_progress:
            chars = iter(tqdm(chars, total=total, desc="Training", unit="char", leave=False))

        # Constructs the first window
        window = ''
        for c in chars:
            window += c
            if len(window) == self._window_length:
                break

        num_read = len(window)
        if len(window) == self._window_length:
            # Processes the rest of the corpus, one character at a time
            for c in chars:
                self._table.record_occurrence(window, c)
                window = window[1:] + c
                num_read += 1
        else:
            logging.info(f"Corpus has {num_read} characters, fewer than the window length {self._window_length}; the model is empty.")

        self._table.finalize()
        self._trained = True
        logging.info(f"Trained on {num_read} characters: {len(self._table)} distinct windows of length {self._window_length}.")

    def train_file(self, path, encoding=None, show_progress=False):
        """Trains on the contents of a text file. I/O errors propagate."""
        logging.info(f"Reading corpus from {path}...")
        with CharStream(path, encoding=encoding) as stream:
            self.train(stream, show_progress=show_progress, total=Path(path).stat().st_size)

    def generate(self, initial_text, desired_length):
        """
        Extends `initial_text` by up to `desired_length` sampled characters.

        The text is returned unchanged if it is shorter than the window length,
        and generation stops early at the first window never seen in training.
        """
        if not self._trained:
            raise ModelStateError("Model has not been trained. Train first.")
        if desired_length < 0:
            raise ValueError(f"desired_length must be non-negative, got {desired_length}")

        if len(initial_text) < self._window_length:
            logging.debug(f"Initial text {initial_text!r} is shorter than the window length; nothing generated.")
            return initial_text

        generated = list(initial_text)
        for _ in range(desired_length):
            window = ''.join(generated[-self._window_length:])
            entries = self._table.entries_for(window)
            if entries is None:
                logging.debug(f"Window {window!r} was never seen in training; stopping after {len(generated) - len(initial_text)} characters.")
                break
            generated.append(sample(entries, self._random.random()))

        return ''.join(generated)

    def __str__(self):
        return str(self._table)
