"""Shared bounds for path/query identifiers."""

# Rooms and products have INT4 primary keys; user ids stay unbounded (external ids)
MAX_ROW_ID = 2**31 - 1
