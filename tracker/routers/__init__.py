"""
FastAPI routers for the local habit grid.

Each module exposes an APIRouter included by tracker.app. Routers only call
HabitStore operations; they never edit completion data themselves.
"""
