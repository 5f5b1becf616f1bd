"""Single-user habit tracker: week-indexed completion model plus local persistence."""
