from pathlib import Path

from . import config


class CharStream:
    """
    Reads a text file one character at a time.

    The file is opened lazily and read in chunks of config.READ_CHUNK_SIZE
    characters. Use is_empty()/read_char() for explicit pulls, or iterate
    over the stream directly. I/O and decoding errors propagate to the caller.
    """
    def __init__(self, path, encoding=None, chunk_size=None):
        self.path = Path(path)
        self.encoding = encoding or config.CORPUS_ENCODING
        self.chunk_size = chunk_size or config.READ_CHUNK_SIZE
        self._file = None
        self._buffer = ''
        self._pos = 0
        self._exhausted = False
        self._closed = False

    def _open(self):
        if self._file is None and not self._exhausted:
            # newline='' keeps '\r\n' as two characters, matching the bytes on disk.
            self._file = open(self.path, 'r', encoding=self.encoding, newline='')

    def _fill(self):
        """Makes sure the buffer has an unread character unless the file is done."""
        if self._closed:
            raise ValueError(f"I/O operation on closed CharStream for {self.path}")
        while self._pos >= len(self._buffer) and not self._exhausted:
            self._open()
            self._buffer = self._file.read(self.chunk_size)
            self._pos = 0
            if not self._buffer:
                self._release()
                self._exhausted = True

    def is_empty(self):
        self._fill()
        return self._pos >= len(self._buffer)

    def read_char(self):
        if self.is_empty():
            raise EOFError(f"No more characters in {self.path}")
        c = self._buffer[self._pos]
        self._pos += 1
        return c

    def _release(self):
        if self._file is not None:
            self._file.close()
            self._file = None

    def close(self):
        self._release()
        self._closed = True

    def __iter__(self):
        while not self.is_empty():
            yield self.read_char()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
