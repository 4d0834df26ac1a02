"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskFilter, validation results)
- task_dates.py: calendar helpers and the priority rule
- task_validation.py: text / due-date checks
- task_store.py: TaskStore aggregate (single source of truth, persists every mutation)
"""
