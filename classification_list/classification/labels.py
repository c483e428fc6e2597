# ==============================================
# Labels (Data Classes)
# ==============================================
#
# PURPOSE:
#   A mapping method may answer with nothing, one label, or an
#   ordered sequence of labels. These data classes give that answer
#   a fixed shape so the classification code never has to inspect
#   raw return values itself.
#
# CLASSES:
# --------
# - NoLabel     → element is not assigned (None, "", [] ...)
# - OneLabel    → element is assigned to a single label
# - ManyLabels  → element is assigned to every label, in order
#
#   Each exposes:
#   - labels -> tuple   → the labels to assign, possibly empty
#
# FUNCTION:
# ---------
# - resolve_labels(raw) -> LabelResult
#     Convert a raw mapping-method result into one of the above.
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Tuple, Union


@dataclass(frozen=True)
class NoLabel:
    """The mapping method did not place the element anywhere."""

    @property
    def labels(self) -> Tuple[Any, ...]:
        return ()


@dataclass(frozen=True)
class OneLabel:
    """The mapping method placed the element under a single label."""
    label: Any

    @property
    def labels(self) -> Tuple[Any, ...]:
        return (self.label,)


@dataclass(frozen=True)
class ManyLabels:
    """The mapping method placed the element under several labels (fan-out)."""
    values: Tuple[Any, ...]

    @property
    def labels(self) -> Tuple[Any, ...]:
        return self.values


LabelResult = Union[NoLabel, OneLabel, ManyLabels]

NO_LABEL = NoLabel()


def resolve_labels(raw: Any) -> LabelResult:
    """
    Turn whatever a mapping method returned into a LabelResult.

    Rules:
        - falsy (None, "", empty list/tuple)  → NoLabel
        - list or tuple                        → ManyLabels (order kept)
        - anything else                        → OneLabel

    Args:
        raw: The mapping method's return value

    Returns:
        The corresponding LabelResult
    """
    if not raw:
        return NO_LABEL
    if isinstance(raw, (list, tuple)):
        return ManyLabels(tuple(raw))
    return OneLabel(raw)
