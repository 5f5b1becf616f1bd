"""
Persistence adapters.

These modules encapsulate where the habit collection is stored (memory, a
local JSON file, a SQL database). Services depend on the KeyValueStore port
rather than touching a file or an engine directly.
"""
