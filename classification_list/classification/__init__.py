# ==============================================
# TOPIC 2: CUSTOM CLASSIFICATIONS
# ==============================================
#
# This package handles named grouping schemes: computing labels
# for an element and accumulating elements per label.
#
# Modules:
# --------
# - labels.py  → NoLabel / OneLabel / ManyLabels + resolve_labels()
# - scheme.py  → ClassificationMode, CustomClassification
#
# ==============================================

from .labels import NoLabel, OneLabel, ManyLabels, LabelResult, resolve_labels
from .scheme import ClassificationMode, CustomClassification, MappingMethod

__all__ = [
    "NoLabel",
    "OneLabel",
    "ManyLabels",
    "LabelResult",
    "resolve_labels",
    "ClassificationMode",
    "CustomClassification",
    "MappingMethod",
]
