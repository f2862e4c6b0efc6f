from __future__ import annotations


class WindowInvariantError(RuntimeError):
    # Window bookkeeping is corrupt; this is a defect, not a scan outcome.
    pass
