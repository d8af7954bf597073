from itertools import chain, islice
from typing import Iterable, Iterator, Sequence, TypeVar

T = TypeVar('T')


def flatten(ls: Iterable[Iterable[T]]) -> Iterator[T]:
    # flatten([(1, 2), (3, 4)]) --> 1 2 3 4
    """Flatten one level of nesting."""
    return chain.from_iterable(ls)


def chunked(iterable: Iterable[T], n: int) -> Iterator[Sequence[T]]:
    """Collect data into fixed-length rows, the last one may be shorter."""
    # chunked('ABCDEFG', 3) --> ABC DEF G
    it = iter(iterable)
    while True:
        row = tuple(islice(it, n))
        if not row:
            return
        yield row
