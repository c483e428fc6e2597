# ==============================================
# TOPIC 1: IDENTITY & MAIN INDEX
# ==============================================
#
# This package handles reading an element's identifier
# and keeping the identifier → element lookup table.
#
# Modules:
# --------
# - identity.py    → Read the identifying field of a dict or object
# - main_index.py  → MainIndex (id → element, last write wins)
#
# ==============================================

from .identity import read_identifier, has_identifier, DEFAULT_ID_FIELD
from .main_index import MainIndex

__all__ = ["read_identifier", "has_identifier", "DEFAULT_ID_FIELD", "MainIndex"]
