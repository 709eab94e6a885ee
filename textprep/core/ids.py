"""Step id generation."""

import random
import string

_ID_ALPHABET = string.ascii_letters + string.digits


def rand_id(prefix: str = "step", length: int = 5) -> str:
    """Return a random step id such as ``stem_aZ3k9``."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=length))
    return f"{prefix}_{suffix}"
