"""
Library-level constants for fixed pagination behavior.

These values are part of the paginator's contract and are not meant to be
changed via environment variables. For configurable defaults (page size,
page range, scrolling style, logging), see paginator/settings.py.
"""

# ============================================================================
# Page numbering
# ============================================================================

# Pages are 1-indexed; this is also the clamped page when there are no pages
FIRST_PAGE_NUMBER = 1

# Item numbers within a page are 1-indexed as well
FIRST_ITEM_NUMBER = 1


# ============================================================================
# Scrolling style names
# ============================================================================

SCROLLING_STYLE_ALL = "all"
SCROLLING_STYLE_ELASTIC = "elastic"
SCROLLING_STYLE_JUMPING = "jumping"
SCROLLING_STYLE_SLIDING = "sliding"


# ============================================================================
# Adapter names
# ============================================================================

ADAPTER_ARRAY = "array"
ADAPTER_CALLBACK = "callback"
ADAPTER_ITERATOR = "iterator"
ADAPTER_NULL = "null"
ADAPTER_SELECT = "select"


# ============================================================================
# Logging
# ============================================================================

# Name of the library logger configured by paginator.logging
LOGGER_NAME = "paginator"
