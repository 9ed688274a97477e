"""
Elementsnatch Configuration.

Centralizes default values and configuration settings.
"""

from typing import Literal

# Selector defaults
DEFAULT_USE_IDS = True
DEFAULT_USE_CLASSES = True
DEFAULT_INCLUDE_TAG_IF_NO_CLASSES = True
DEFAULT_INCLUDE_NTH_CHILD = False

# Serializer defaults
DEFAULT_INDENT = "  "
DEFAULT_MAX_NODES = 5000
DEFAULT_SKIP_TAG_NAMES = frozenset({"SCRIPT", "STYLE", "TEMPLATE"})
TEXT_MAX_LENGTH = 50
TEXT_ELLIPSIS = "..."
TRUNCATION_MARKER = "/* truncated: reached maxNodes limit */"

# Iteration ceilings for parent-chain walks
ANCESTRY_GUARD = 2000
PATH_GUARD = 5000

# Menu labels
LABEL_MAX_CLASSES = 3

# Notice durations (ms)
NOTICE_OK_MS = 1200
NOTICE_FAIL_MS = 2000

# Document loading
DEFAULT_PARSER = "html.parser"

EscapeMode = Literal["cssom", "hex"]
MenuMode = Literal["path", "css"]
