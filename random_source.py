import random
import secrets
from typing_extensions import override


class RandomSource:
    def random_bit(self) -> bool:
        raise NotImplementedError

    # Returns a random from range [0, 2^k)
    def random_bits(self, k: int) -> int:
        if k < 0:
            msg = f'Number of bits should be non-negative, but got: {k}'
            raise ValueError(msg)

        res = 0
        for _ in range(k):
            res = (res << 1) | self.random_bit()
        return res


class SystemRandomSource(RandomSource):
    @override
    def random_bit(self) -> bool:
        return secrets.randbits(1) == 1

    @override
    def random_bits(self, k: int) -> int:
        if k < 0:
            msg = f'Number of bits should be non-negative, but got: {k}'
            raise ValueError(msg)
        return secrets.randbits(k)


# Not suitable for anything secret, but the same seed gives the same bits
class SeededRandomSource(RandomSource):
    _random: random.Random

    def __init__(self, seed: int | str | bytes):
        self._random = random.Random(seed)  # noqa: S311

    @override
    def random_bit(self) -> bool:
        return self._random.getrandbits(1) == 1

    @override
    def random_bits(self, k: int) -> int:
        if k < 0:
            msg = f'Number of bits should be non-negative, but got: {k}'
            raise ValueError(msg)
        return self._random.getrandbits(k)


default_source = SystemRandomSource()
