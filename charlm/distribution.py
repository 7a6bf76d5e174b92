from dataclasses import dataclass


@dataclass
class CharEntry:
    """A character seen after a window, with its running count during training."""
    character: str
    count: int = 1

    def __str__(self):
        return f"({self.character} {self.count})"


@dataclass(frozen=True)
class CharData:
    """
    A finalized entry: the count plus the probability and cumulative
    probability computed from it. Frozen so generation cannot alter it.
    """
    character: str
    count: int
    probability: float
    cumulative_probability: float

    def __str__(self):
        return f"({self.character} {self.count} {self.probability} {self.cumulative_probability})"


def build_distribution(entries):
    """
    Converts an ordered list of CharEntry counts into a tuple of CharData.

    Probabilities are accumulated in list order, so the last cumulative value
    may land slightly under 1.0. No renormalization is done; the sampler's
    fallback covers the gap.
    """
    total = sum(entry.count for entry in entries)
    if total < 1:
        raise ValueError("Cannot build a distribution from an empty entry list.")

    distribution = []
    cumulative = 0.0
    for entry in entries:
        probability = entry.count / total
        cumulative = probability + cumulative
        distribution.append(CharData(entry.character, entry.count, probability, cumulative))
    return tuple(distribution)
