import logging

from random_source import RandomSource, default_source

from .modexp import mod_exp
from .sampler import Sampler, uniform_randint

logger = logging.getLogger(__name__)

# The probability of a false positive is at most (1/4)^rounds
ROUNDS = 10


def check_candidate(n: object) -> None:
    # bool is a subclass of int, but True is not a number to test
    if not isinstance(n, int) or isinstance(n, bool):
        msg = f'Expected int, but got: {type(n)}'
        raise TypeError(msg)


# Returns (s, d), such that n - 1 = 2^s * d and d is odd
def decompose(n: int) -> tuple[int, int]:
    if n < 3 or n % 2 == 0:  # noqa: PLR2004
        msg = f'Expected an odd number greater than 2, but got: {n}'
        raise ValueError(msg)

    s, d = 0, n - 1
    while d % 2 == 0:
        d //= 2
        s += 1
    return s, d


# https://en.wikipedia.org/wiki/Miller%E2%80%93Rabin_primality_test#Miller%E2%80%93Rabin_test
def is_strong_probable_prime(n: int, a: int, s: int, d: int) -> bool:
    x = mod_exp(a, d, n)
    if x in (1, n - 1):
        return True

    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return True
        if x == 1:  # nontrivial square root of 1
            return False

    return False


def miller_rabin(
    n: int,
    rounds: int = ROUNDS,
    *,
    source: RandomSource = default_source,
    sampler: Sampler = uniform_randint,
) -> bool:
    check_candidate(n)
    if rounds < 1:
        msg = f'Number of rounds should be positive, but got: {rounds}'
        raise ValueError(msg)

    logger.debug('miller_rabin: >>> n: %r, rounds: %r', n, rounds)

    # small cases
    if n in (2, 3):
        logger.debug('miller_rabin: <<< %r is prime', n)
        return True
    if n <= 1 or n % 2 == 0:
        logger.debug('miller_rabin: <<< %r is composite', n)
        return False

    s, d = decompose(n)
    for i in range(rounds):
        a = sampler(2, n - 2, source)
        if not is_strong_probable_prime(n, a, s, d):
            logger.debug('miller_rabin: <<< %r is composite, witness: %r, round: %r', n, a, i + 1)
            return False

    logger.debug('miller_rabin: <<< %r is probably prime', n)
    return True
