"""Approximate structural counting over raw text.

These counters stand in for a real parse. They are deliberately crude and
their miscounts are part of the scoring contract, so scores stay comparable
across runs and versions. Swap the implementation here, not at call sites.
"""

from typing import Iterable


def approximate_entry_count(block_text: str) -> int:
    """Estimate the number of entries in an object-literal block.

    The estimate is the number of comma-separated pieces of ``block_text``;
    empty text counts as zero entries.

    Known failure modes:
        - commas inside nested objects, argument lists or array literals
          each add a phantom entry
        - commas inside string literals or comments do the same
        - a trailing comma after the last entry adds one
        - the block text is cut at the first closing brace, so entries after
          a nested ``}`` are never seen
    """
    if not block_text:
        return 0
    return len(block_text.split(","))


def approximate_entry_count_all(blocks: Iterable[str]) -> int:
    """Count over several blocks concatenated end to end.

    Concatenation fuses the last piece of one block with the first piece of
    the next, so N blocks yield (total commas + 1) pieces, not a sum of
    per-block counts.
    """
    return approximate_entry_count("".join(blocks))
