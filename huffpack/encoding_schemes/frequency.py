from collections import Counter
from typing import Hashable, Sequence


def count_frequencies(symbols: Sequence[Hashable], exclude_last: bool = False) -> Counter:
    """
    Count how often each distinct symbol occurs.

    Keys keep first-occurrence order, which the tree builder uses to break
    ties between equal weights.

    With exclude_last=True only symbols[0:len-1] are counted, matching the
    legacy compressor whose frequency loop stopped one short of the end.
    """
    if exclude_last:
        symbols = symbols[:-1]
    return Counter(symbols)
