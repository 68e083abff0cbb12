from collections.abc import Callable

from random_source import RandomSource, default_source

Sampler = Callable[[int, int, RandomSource], int]


def _check_range(low: int, high: int) -> None:
    if low > high:
        msg = f'Empty range: [{low}, {high}]'
        raise ValueError(msg)


# Rejection sampling: draw just enough bits to cover the range, retry on overflow
def uniform_randint(low: int, high: int, source: RandomSource = default_source) -> int:
    _check_range(low, high)

    width = high - low
    bits = width.bit_length()
    while True:
        x = source.random_bits(bits)
        if x <= width:
            return low + x


# Halves the range on every random bit. Cheaper on bits, but only approximately uniform:
# when the range size is not a power of two the halves differ in size yet are picked equally often
def bisect_randint(low: int, high: int, source: RandomSource = default_source) -> int:
    _check_range(low, high)

    while low != high:
        mid = (low + high) // 2
        if source.random_bit():
            low = mid + 1
        else:
            high = mid
    return low
