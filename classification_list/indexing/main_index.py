# ==============================================
# MainIndex
# ==============================================
#
# PURPOSE:
#   Identifier → element lookup table kept next to the backing list.
#
# CLASS: MainIndex
# ----------------
#   Stateful: owns the id → element dict, never the list itself.
#
#   Constructor:
#   ------------
#   - __init__(id_field: str = "id")
#
#   Methods:
#   --------
#   - build(elements: list) -> bool
#       Rebuild from scratch, but ONLY if the first element carries an
#       identifier. Returns True when a rebuild happened, False when the
#       index was left untouched.
#
#   - add(element) -> bool
#       Insert/overwrite one element by its identifier (last write wins).
#       Elements without an identifier are skipped.
#
#   - get(identifier) -> element | None
#   - clear() -> None
#   - __len__ / __contains__
#
# ==============================================

import logging
from typing import Any, Dict, List, Optional

from .identity import DEFAULT_ID_FIELD, has_identifier, read_identifier

logger = logging.getLogger(__name__)


class MainIndex:
    """
    Maps each element's identifier to the element.

    Duplicate identifiers are not an error: the most recently added
    element wins.
    """

    def __init__(self, id_field: str = DEFAULT_ID_FIELD):
        self.id_field = id_field
        self._entries: Dict[Any, Any] = {}

    def build(self, elements: List[Any]) -> bool:
        """
        Rebuild the index from a whole list.

        Only the first element is inspected to decide whether the list is
        identifiable at all. If it is not, the current entries are kept
        as they are.

        Args:
            elements: The backing list, in insertion order

        Returns:
            True if the index was rebuilt, False otherwise
        """
        if not elements or not has_identifier(elements[0], self.id_field):
            logger.debug(
                "Main index not rebuilt: first element has no '%s' field",
                self.id_field
            )
            return False

        self.clear()
        for element in elements:
            self.add(element)

        logger.debug("Main index rebuilt with %d entries", len(self._entries))
        return True

    def add(self, element: Any) -> bool:
        """
        Insert or overwrite one element keyed by its identifier.

        Args:
            element: The element to index

        Returns:
            True if the element carried an identifier and was indexed
        """
        identifier = read_identifier(element, self.id_field)
        if identifier is None:
            return False
        self._entries[identifier] = element
        return True

    def get(self, identifier: Any) -> Optional[Any]:
        return self._entries.get(identifier)

    def clear(self) -> None:
        self._entries = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identifier: Any) -> bool:
        return identifier in self._entries
