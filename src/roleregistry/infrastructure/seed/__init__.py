"""Built-in example organizations."""

from roleregistry.infrastructure.seed.silly_penguins import build_silly_penguins

__all__ = [
    "build_silly_penguins",
]
