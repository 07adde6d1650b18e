# src/roast_kit/observability/names.py

"""Standard metric names for roast-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
ROAST_PARSE_DURATION = "roast_parse_duration"

# Counters
ROAST_LINES_SCANNED = "roast_lines_scanned"
# Labelled with category=english|hinglish|memes
ROAST_ITEMS_EXTRACTED = "roast_items_extracted"

# Gauges (items in the most recent parse result)
ROAST_COLLECTION_SIZE = "roast_collection_size"


# ============================================================================
# Source Metrics
# ============================================================================

# Duration
ROAST_FETCH_DURATION = "roast_fetch_duration"

# Counters (labelled with source=file|http|text)
ROAST_FETCH_TOTAL = "roast_fetch_total"
ROAST_FETCH_ERRORS_TOTAL = "roast_fetch_errors_total"


# ============================================================================
# Loader Metrics
# ============================================================================

# Duration (fetch + parse)
ROAST_LOAD_DURATION = "roast_load_duration"
