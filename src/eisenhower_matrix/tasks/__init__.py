"""
Task subsystem.

Components:
- quadrants.py: quadrant classifier (the four buckets + display metadata)
- task_models.py: data structures (Task, TaskPhase) and record (de)serialization
- task_store.py: in-memory authoritative collection, saves a snapshot after every mutation
- removal.py: deferred removal transition (active -> completing -> removed)
- task_api.py: inbound signals used by the UI layer
"""
