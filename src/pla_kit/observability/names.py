# src/pla_kit/observability/names.py

"""Standard metric names for pla-kit observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PLA_PARSE_DURATION = "pla_parse_duration"

# Counters
PLA_PARSES_TOTAL = "pla_parses_total"
PLA_PARSE_ERRORS_TOTAL = "pla_parse_errors_total"  # label: kind
PLA_SUB_RECORDS_PARSED = "pla_sub_records_parsed"  # label: command
PLA_LINES_IGNORED = "pla_lines_ignored"

# Gauges (size of the most recent parse)
PLA_ENTRIES_PARSED = "pla_entries_parsed"
