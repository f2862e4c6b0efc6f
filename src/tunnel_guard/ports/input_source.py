from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from tunnel_guard.domain.messages import RawLine


# InputSource port: where the candidate steps come from, one step per line.
@runtime_checkable
class InputSource(Protocol):
    def read(self) -> Iterable[RawLine]:
        """Yield one RawLine per physical line, 1-based, lazily and in order.

        Lines are not validated here; the parse step decides which are steps.
        """
        raise NotImplementedError("InputSource is a port; use a concrete adapter.")
