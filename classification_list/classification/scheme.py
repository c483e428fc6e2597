# ==============================================
# CustomClassification
# ==============================================
#
# PURPOSE:
#   One named grouping scheme: a mapping method that computes
#   label(s) for an element, a mode, and the accumulated classes.
#
# ENUMS:
# ------
# - ClassificationMode(Enum): EXCLUSIVE, GROUPING
#     EXCLUSIVE ("mono") → classes[label] is a single element, last write wins
#     GROUPING           → classes[label] is a list, appended in order
#
# CLASS: CustomClassification (dataclass)
# ---------------------------------------
#   Attributes:
#   -----------
#   - name: str
#   - mapping_method: Callable[[element], None | label | list[label]]
#   - mono: bool                 → True = EXCLUSIVE, False = GROUPING
#   - classes: dict              → label → element | list[element]
#
#   Methods:
#   --------
#   - classify(element) -> LabelResult
#       Run the mapping method and assign the element to every
#       resulting label.
#
#   - assign(label, element) -> None
#       Put one element under one label according to the mode.
#
#   - class_names() -> list[label]
#       Labels holding an element (or a non-empty list), in first-assignment order.
#
#   - to_dict() -> dict
#       Summary for inspection (mode + member count per label).
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from .labels import LabelResult, resolve_labels


MappingMethod = Callable[[Any], Any]


class ClassificationMode(Enum):
    """
    How a scheme stores the elements of one label.

    - EXCLUSIVE: one element per label, later assignment overwrites
    - GROUPING: every assigned element, in assignment order
    """
    EXCLUSIVE = "exclusive"
    GROUPING = "grouping"


@dataclass
class CustomClassification:
    """
    A named, independently registered grouping scheme.

    Classes are only ever added to: a grouping label's list is created
    on first assignment and appended to afterwards.
    """

    name: str
    mapping_method: MappingMethod
    mono: bool = False
    classes: Dict[Any, Any] = field(default_factory=dict)

    @property
    def mode(self) -> ClassificationMode:
        return ClassificationMode.EXCLUSIVE if self.mono else ClassificationMode.GROUPING

    def classify(self, element: Any) -> LabelResult:
        """
        Apply the mapping method to an element and assign it.

        Args:
            element: The element to classify

        Returns:
            The resolved labels (NoLabel when nothing was assigned)
        """
        result = resolve_labels(self.mapping_method(element))
        for label in result.labels:
            self.assign(label, element)
        return result

    def assign(self, label: Any, element: Any) -> None:
        """
        Store one element under one label.

        Args:
            label: The class label
            element: The element to store
        """
        if self.mono:
            self.classes[label] = element
            return

        members = self.classes.get(label)
        if members is None:
            self.classes[label] = [element]
        else:
            members.append(element)

    def class_names(self) -> List[Any]:
        # Only a cleared slot is skipped: None, or an empty grouping list.
        # Exclusive elements count even when falsy themselves ({}, [], 0).
        return [
            label for label, value in self.classes.items()
            if value is not None and (self.mono or value)
        ]

    def to_dict(self) -> Dict[str, Any]:
        """
        Summarize the scheme for logging or inspection.

        Elements themselves are not included, only how many each label holds.

        Returns:
            A dictionary keyed by the labels exactly as stored
        """
        if self.mono:
            sizes = {label: 1 for label in self.class_names()}
        else:
            sizes = {label: len(self.classes[label]) for label in self.class_names()}
        return {
            "name": self.name,
            "mode": self.mode.value,
            "label_count": len(sizes),
            "classes": sizes,
        }
