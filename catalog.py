from types import MappingProxyType
from typing import Mapping

from .datatypes import Play
from .errors import UnknownPlay


class PlayCatalog:
    """Read-only lookup of plays by identifier."""

    def __init__(self, plays: Mapping[str, Play]):
        self._plays = MappingProxyType(dict(plays))

    def lookup(self, play_id: str) -> Play:
        try:
            return self._plays[play_id]
        except KeyError:
            raise UnknownPlay(play_id) from None

    def __contains__(self, play_id) -> bool:
        return play_id in self._plays

    def __len__(self) -> int:
        return len(self._plays)
