"""
Task subsystem.

Components:
- task_models.py: data structures (Task, FilterMode, TaskCounts) and errors
- task_store.py: in-memory ordered storage + create/update/toggle/delete/filter
"""
