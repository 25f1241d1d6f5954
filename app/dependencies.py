import random

from app.config import settings

# One generator for the process, so a configured seed gives a reproducible
# sequence of ducks rather than the same duck on every request.
_rng = random.Random(settings.random_seed)


def get_rng() -> random.Random:
    """Random source for duck generation; seeded when settings.random_seed is set."""
    return _rng
