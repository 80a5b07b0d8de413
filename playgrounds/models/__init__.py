from .tag import Tag
from .playground import Playground
from .legacy import LegacyPlayground, LegacyPlaygroundVersion


__all__ = [
    "Tag",
    "Playground",
    "LegacyPlayground",
    "LegacyPlaygroundVersion",
]
