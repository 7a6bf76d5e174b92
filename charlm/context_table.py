from .distribution import CharEntry, build_distribution
from .errors import ModelStateError


class ContextTable:
    """
    Maps each window (a string of exactly `window_length` characters) to the
    characters that followed it, in the order they were first seen.

    The table has two phases. While training, each window holds a list of
    mutable CharEntry counts. After finalize() every list is replaced by a
    tuple of frozen CharData and the table no longer accepts occurrences.
    """
    def __init__(self, window_length):
        if window_length < 1:
            raise ValueError(f"window_length must be at least 1, got {window_length}")
        self.window_length = window_length
        self._entries = {}
        self._finalized = False

    @property
    def finalized(self):
        return self._finalized

    def record_occurrence(self, window, character):
        """Counts `character` as following `window`, appending it if it is new."""
        if self._finalized:
            raise ModelStateError("Cannot record occurrences into a finalized table.")
        if len(window) != self.window_length:
            raise ValueError(f"Window {window!r} does not have length {self.window_length}")

        entries = self._entries.get(window)
        if entries is None:
            entries = []
            self._entries[window] = entries

        # Linear scan keeps first-seen order explicit; per-window lists are short.
        for entry in entries:
            if entry.character == character:
                entry.count += 1
                return
        entries.append(CharEntry(character))

    def entries_for(self, window):
        """Returns the ordered entries for `window`, or None if it was never observed."""
        return self._entries.get(window)

    def finalize(self):
        """Computes probabilities for every window. Runs once."""
        if self._finalized:
            raise ModelStateError("Table has already been finalized.")
        for window, entries in self._entries.items():
            self._entries[window] = build_distribution(entries)
        self._finalized = True

    def items(self):
        return self._entries.items()

    def __contains__(self, window):
        return window in self._entries

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __str__(self):
        lines = []
        for window, entries in self._entries.items():
            rendered = ' '.join(str(entry) for entry in entries)
            lines.append(f"{window} : {rendered}")
        return '\n'.join(lines)
