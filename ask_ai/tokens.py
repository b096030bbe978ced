"""Character-count token estimate used by the token limit guard."""

import math

APPROXIMATION_LOSS = 3


def estimate_token_count(text: str, approximation_loss: int = APPROXIMATION_LOSS) -> int:
    """
    Estimate how many tokens ``text`` costs.

    Roughly five characters per token, plus a fixed offset for what the
    heuristic misses.
    """
    return math.ceil(len(text) / 5) + approximation_loss
