# ==============================================
# ClassificationList: Orchestrator
# ==============================================
#
# PURPOSE:
#   The MAIN CLASS. Wraps a list of elements and keeps every derived
#   index in step with it. Users interact with this class only.
#
# HOW IT CONNECTS THE 2 TOPICS:
#
#   ┌──────────────────────────────────────────────────────┐
#   │                  ClassificationList                  │
#   │                                                      │
#   │   push(element) ──► [ LIST ]  (caller's list, by ref)│
#   │         │                                            │
#   │         ├──► TOPIC 1: MainIndex.add()                │
#   │         │      id → element                          │
#   │         │                                            │
#   │         └──► TOPIC 2: CustomClassification.classify()│
#   │                for every registered scheme           │
#   └──────────────────────────────────────────────────────┘
#
#
# CLASS: ClassificationList
# -------------------------
#
#   Constructor:
#   ------------
#   - __init__(items: list | None = None,
#              build_main_index: bool | None = None,
#              config: AppConfig | None = None)
#       1. Load config (from .env or passed in)
#       2. Keep the list by reference
#       3. Build the main index if enabled
#
#   Public Methods (User-facing API):
#   ---------------------------------
#   - get_list() -> list
#   - init_main_classing() -> self
#   - add_custom_classification(name, mapping_method, mono=False, init=False) -> self
#   - init_custom_classification(name) -> self
#   - init_all_custom_classifications() -> self
#   - main_cls_get(identifier) -> element | None
#   - custom_cls_get(name, label) -> element | list | None
#   - get_custom_classification(name) -> CustomClassification | None
#   - get_custom_classification_classes_names(name) -> list | None
#   - get_custom_classifications_names() -> list[str]
#   - push(element) -> self
#   - push_batch(elements) -> self
#   - get_status() -> dict
#
#   Internal Methods:
#   -----------------
#   - _push_to_main_classing(element) -> None
#   - _push_to_custom_class(name, element) -> None
#       NOT SAFE: assumes `name` is registered (KeyError otherwise).
#       Every public caller checks first.
#
#   Attributes:
#   -----------
#   - _list: list                                      (backing list)
#   - _main_index: MainIndex                           (Topic 1)
#   - _custom_classifications: dict[str, CustomClassification]  (Topic 2)
#
# ==============================================

import logging
from typing import Any, Dict, Iterable, List, Optional

from classification_list.config import AppConfig, get_config
from classification_list.indexing.main_index import MainIndex
from classification_list.classification.scheme import CustomClassification, MappingMethod

logger = logging.getLogger(__name__)


class ClassificationList:
    """
    An ordered list of elements with derived lookup indexes:

    1. Main index: identifier → element
    2. Custom classifications: named schemes grouping elements by label

    Not thread-safe. Callers sharing an instance across threads must
    serialize every mutating call against each other and against reads.
    """

    def __init__(
        self,
        items: Optional[List[Any]] = None,
        build_main_index: Optional[bool] = None,
        config: Optional[AppConfig] = None
    ):
        """
        Wrap a list and build the main index.

        Args:
            items: The backing list, kept by reference. None starts empty.
            build_main_index: Build the main index now. None uses the
                configured default (True unless overridden).
            config: Package configuration. If None, loads from environment.
        """
        self._config = config or get_config()

        self._list: List[Any] = items if items is not None else []
        self._main_index = MainIndex(self._config.identity.id_field)
        self._custom_classifications: Dict[str, CustomClassification] = {}

        if build_main_index is None:
            build_main_index = self._config.identity.build_main_index
        self._use_main_index = build_main_index

        if build_main_index:
            self.init_main_classing()

    def get_list(self) -> List[Any]:
        """
        Return the backing list by reference.

        Mutating it directly bypasses index maintenance; use push().
        """
        return self._list

    # ======================================
    # Main classing
    # ======================================
    def init_main_classing(self) -> "ClassificationList":
        """
        (Re)build the main index from the whole list.

        Only the first element is checked: if it carries an identifier the
        index is reset and every element is keyed by its identifier (later
        duplicates overwrite earlier ones). Otherwise the index is left as it
        was.

        Returns:
            self
        """
        self._main_index.build(self._list)
        return self

    def main_cls_get(self, identifier: Any) -> Optional[Any]:
        """
        Look up an element by identifier.

        Args:
            identifier: The identifier value

        Returns:
            The most recently indexed element with that identifier, or None
        """
        return self._main_index.get(identifier)

    # ======================================
    # Custom classifications
    # ======================================
    def add_custom_classification(
        self,
        classification_name: str,
        mapping_method: MappingMethod,
        mono: bool = False,
        init: bool = False
    ) -> "ClassificationList":
        """
        Register (or replace) a named classification scheme.

        The scheme starts empty. Elements already in the list are only
        classified if `init` is True or a re-scan is requested later;
        every subsequent push() is classified regardless.

        Args:
            classification_name: Unique scheme name
            mapping_method: element → None | label | list of labels
            mono: True for one element per label (last write wins),
                False to accumulate a list per label
            init: Re-scan the current list immediately

        Returns:
            self
        """
        if classification_name in self._custom_classifications:
            logger.debug("Replacing classification '%s'", classification_name)

        self._custom_classifications[classification_name] = CustomClassification(
            name=classification_name,
            mapping_method=mapping_method,
            mono=mono
        )
        logger.debug(
            "Registered classification '%s' (%s)",
            classification_name,
            self._custom_classifications[classification_name].mode.value
        )

        if init:
            self.init_custom_classification(classification_name)

        return self

    def init_custom_classification(self, classification_name: str) -> "ClassificationList":
        """
        Classify every element of the list for one scheme.

        Classes are not cleared first. Unknown names are ignored.

        Args:
            classification_name: The scheme to re-scan

        Returns:
            self
        """
        if classification_name in self._custom_classifications:
            for element in self._list:
                self._push_to_custom_class(classification_name, element)
            logger.debug(
                "Re-scanned classification '%s' over %d elements",
                classification_name,
                len(self._list)
            )
        return self

    def init_all_custom_classifications(self) -> "ClassificationList":
        """Re-scan every registered scheme."""
        for classification_name in list(self._custom_classifications):
            self.init_custom_classification(classification_name)
        return self

    def custom_cls_get(self, classification_name: str, class_name: Any) -> Optional[Any]:
        """
        Get what a scheme holds for one label.

        Args:
            classification_name: The scheme name
            class_name: The label

        Returns:
            The element (exclusive mode), the list of elements (grouping
            mode), or None if the scheme or label is unknown
        """
        classification = self._custom_classifications.get(classification_name)
        if classification is None:
            return None
        return classification.classes.get(class_name)

    def get_custom_classification(self, classification_name: str) -> Optional[CustomClassification]:
        return self._custom_classifications.get(classification_name)

    def get_custom_classification_classes_names(self, classification_name: str) -> Optional[List[Any]]:
        """
        List the labels a scheme currently holds.

        Args:
            classification_name: The scheme name

        Returns:
            Labels with a non-empty value, in first-assignment order,
            or None if the scheme is not registered
        """
        classification = self._custom_classifications.get(classification_name)
        if classification is None or classification.classes is None:
            return None
        return classification.class_names()

    def get_custom_classifications_names(self) -> List[str]:
        return list(self._custom_classifications)

    # ======================================
    # Appending
    # ======================================
    def push(self, element: Any) -> "ClassificationList":
        """
        Append an element and update every index.

        1. Append to the list
        2. Index it by identifier (if it has one)
        3. Classify it in every registered scheme

        Args:
            element: The element to append

        Returns:
            self
        """
        self._list.append(element)
        self._push_to_main_classing(element)

        for classification_name in list(self._custom_classifications):
            self._push_to_custom_class(classification_name, element)

        return self

    def push_batch(self, elements: Iterable[Any]) -> "ClassificationList":
        """
        Append several elements in order.

        Args:
            elements: Elements to push

        Returns:
            self
        """
        for element in elements:
            self.push(element)
        return self

    def get_status(self) -> Dict[str, Any]:
        """
        Get a snapshot of the structure's size and schemes.

        Returns:
            Dictionary with list/index sizes and per-scheme summaries
        """
        return {
            "list_size": len(self._list),
            "build_main_index": self._use_main_index,
            "main_index_size": len(self._main_index),
            "id_field": self._main_index.id_field,
            "classifications": {
                name: classification.to_dict()
                for name, classification in self._custom_classifications.items()
            },
        }

    # ======================================
    # Internal
    # ======================================
    def _push_to_main_classing(self, element: Any) -> None:
        self._main_index.add(element)

    def _push_to_custom_class(self, classification_name: str, element: Any) -> None:
        # Not safe: classification_name must already be registered
        self._custom_classifications[classification_name].classify(element)
