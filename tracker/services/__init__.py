"""
Use cases of the habit tracker.

The HabitStore owns the in-memory collection and the viewed week; the
HabitPersistence adapter mirrors the collection into a key-value slot.
Routers call the store instead of touching habits or storage directly.
"""
