"""Short random identifiers for new entities."""

import random
import string

_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 9


def new_id() -> str:
    """Return a 9-character base36 token.

    Not cryptographically strong; collisions are possible and undetected.
    """
    return "".join(random.choices(_ALPHABET, k=ID_LENGTH))
