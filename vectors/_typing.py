from __future__ import annotations

try:
    from typing import Self as Self
except ImportError:
    from typing_extensions import Self as Self
