import logging

from random_source import RandomSource, default_source

from .sampler import Sampler, uniform_randint
from .sieve import SieveResult, sieve
from .witness import ROUNDS, check_candidate, miller_rabin

logger = logging.getLogger(__name__)


def is_prime(
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

    logger.debug('is_prime: >>> n: %r', n)

    verdict = sieve(n)
    if verdict is not SieveResult.INCONCLUSIVE:
        res = verdict is SieveResult.PRIME
    else:
        res = miller_rabin(n, rounds, source=source, sampler=sampler)

    logger.debug('is_prime: <<< n: %r, res: %r', n, res)
    return res
