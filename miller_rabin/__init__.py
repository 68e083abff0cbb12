from .modexp import mod_exp
from .primes import is_prime
from .sampler import Sampler, bisect_randint, uniform_randint
from .sieve import SMALL_PRIMES, SieveResult, sieve
from .witness import ROUNDS, decompose, is_strong_probable_prime, miller_rabin

__all__ = [
    'ROUNDS',
    'SMALL_PRIMES',
    'Sampler',
    'SieveResult',
    'bisect_randint',
    'decompose',
    'is_prime',
    'is_strong_probable_prime',
    'miller_rabin',
    'mod_exp',
    'sieve',
    'uniform_randint',
]
