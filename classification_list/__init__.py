# ==============================================
# Classification List
# ==============================================
#
# Package Structure (2 Topics + Orchestrator):
#
# classification_list/
# ├── indexing/               # Topic 1: Element identity + main index (id → element)
# ├── classification/         # Topic 2: Named custom classification schemes
# ├── config.py               # Configuration management
# ├── logging_config.py       # Package logger setup
# └── classification_list.py  # Final orchestrator class
#
# ==============================================

__version__ = "0.1.0"

from .config import AppConfig, IdentityConfig, LoggingConfig, get_config, reset_config
from .logging_config import configure_logging, setup_logging
from .indexing import MainIndex, read_identifier
from .classification import (
    ClassificationMode,
    CustomClassification,
    ManyLabels,
    NoLabel,
    OneLabel,
    resolve_labels,
)
from .classification_list import ClassificationList

__all__ = [
    "__version__",
    "AppConfig",
    "IdentityConfig",
    "LoggingConfig",
    "get_config",
    "reset_config",
    "setup_logging",
    "configure_logging",
    "MainIndex",
    "read_identifier",
    "ClassificationMode",
    "CustomClassification",
    "ManyLabels",
    "NoLabel",
    "OneLabel",
    "resolve_labels",
    "ClassificationList",
]
