import random


def generate_otp(length=6, rng=None):
    """Uniformly random numeric code without a leading zero."""
    rng = rng or random.SystemRandom()
    return str(rng.randint(10 ** (length - 1), 10**length - 1))
