"""
Stable short digests of board positions, for logs and debug output.
"""

import hashlib
import numpy as np


def hash_board(board: np.ndarray, current_player: int = 0) -> str:
    """
    Short stable digest for a position.

    Not used for lookup (the node store keys on full value equality);
    it names positions in logs and debug output so that two runs agree.
    """
    digest = hashlib.sha256(board.tobytes())
    digest.update(bytes([int(current_player) & 0xFF]))
    return digest.hexdigest()[:16]
