# sc2k_decoder/parser/registry.py
from typing import Dict, Iterable, List, Optional, Type
import logging

from ..segments import SEGMENT_TYPES, BaseSegment

logger = logging.getLogger(__name__)


class SegmentRegistry:
    """Registry of segment interpreters mapped to segment titles."""

    def __init__(self, segment_types: Iterable[Type[BaseSegment]] = ()):
        self._parsers: Dict[str, Type[BaseSegment]] = {}
        for segment_type in segment_types:
            self.register(segment_type.TITLE, segment_type)

    def register(self, title: str, parser_class: Type[BaseSegment]) -> None:
        """Register an interpreter for a segment title."""
        if title in self._parsers:
            logger.debug(f"Replacing interpreter for {title}")
        self._parsers[title] = parser_class

    def get_parser(self, title: str) -> Optional[Type[BaseSegment]]:
        """Get interpreter for title, or None if the segment is not understood."""
        return self._parsers.get(title)

    def titles(self) -> List[str]:
        """List registered segment titles in sorted order."""
        return sorted(self._parsers)

    def __contains__(self, title: str) -> bool:
        return title in self._parsers


def default_registry() -> SegmentRegistry:
    """Registry with every known interpreter.

    XMIC, XTHG, XGRP, XPLC, XFIR, XPOP, XROG, XPLT, XVAL, XCRM and XTRF are
    not decoded yet and are skipped.
    """
    return SegmentRegistry(SEGMENT_TYPES)
