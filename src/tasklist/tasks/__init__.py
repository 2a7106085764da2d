"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, DueState, Field)
- errors.py: error kinds with user-facing messages
- validators.py: pure parsers for dates, times, priorities and descriptions
- render.py: fixed-width table rendering
- task_list.py: the ordered in-memory collection
- task_store.py: JSON file persistence
"""
