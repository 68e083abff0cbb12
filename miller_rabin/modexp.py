# https://en.wikipedia.org/wiki/Modular_exponentiation#Right-to-left_binary_method
def mod_exp(base: int, exponent: int, modulus: int) -> int:
    if exponent < 0:
        msg = f'Exponent should be non-negative, but got: {exponent}'
        raise ValueError(msg)
    if modulus == 0:
        msg = 'Modulus should not be zero'
        raise ValueError(msg)

    res = 1 % modulus
    if exponent == 0:
        return res

    base %= modulus
    while exponent:
        if exponent & 1:
            res = res * base % modulus

        exponent >>= 1
        base = base * base % modulus
    return res
