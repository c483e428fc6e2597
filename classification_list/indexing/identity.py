# ==============================================
# Identity
# ==============================================
#
# PURPOSE:
#   Read the identifying field of an element for the main index.
#
# FUNCTIONS:
# ----------
# - read_identifier(element, id_field="id") -> value | None
#     Mappings are read by key, anything else by attribute.
#     A falsy value ("" / 0 / None) counts as no identifier.
#
# - has_identifier(element, id_field="id") -> bool
#
# ==============================================

from collections.abc import Mapping
from typing import Any, Optional


DEFAULT_ID_FIELD = "id"


def read_identifier(element: Any, id_field: str = DEFAULT_ID_FIELD) -> Optional[Any]:
    if element is None:
        return None

    if isinstance(element, Mapping):
        identifier = element.get(id_field)
    else:
        identifier = getattr(element, id_field, None)

    if not identifier:
        return None
    return identifier


def has_identifier(element: Any, id_field: str = DEFAULT_ID_FIELD) -> bool:
    return read_identifier(element, id_field) is not None
