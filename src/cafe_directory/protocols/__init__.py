"""Protocol interfaces for swappable implementations.

Usage:
    ```python
    from cafe_directory.protocols import CafeDirectory

    directory: CafeDirectory = StaticCafeDirectory.create()
    ```
"""

from .cafe_directory import CafeDirectory

__all__ = [
    "CafeDirectory",
]
