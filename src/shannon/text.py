"""Method-style access to :func:`shannon.entropy.entropy`."""

from __future__ import annotations

import numpy as np

from shannon.entropy import entropy as _entropy


class EntropyText(str):
    """A ``str`` with an ``.entropy()`` accessor.

    ``EntropyText(s).entropy()`` is the same call as ``entropy(s)``.
    """

    __slots__ = ()

    def entropy(self) -> np.float32:
        return _entropy(self)
