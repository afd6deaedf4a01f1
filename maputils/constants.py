from __future__ import annotations
from typing import Final

# Value stored for every key by create_set.
SET_MEMBER: Final[bool] = True

# Argument count that makes create/create_set unpack a single sequence.
SINGLE_SEQUENCE_ARGC: Final[int] = 1

# Length of a (key, value) pair accepted by create.
PAIR_LEN: Final[int] = 2

# Sequence types treated as containers by deep_clone and get_value_by_path.
SEQUENCE_TYPES: Final[tuple[type, ...]] = (list, tuple)
