"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskPriority, TaskFilter, Progress) and seed data
- task_store.py: in-memory store with add/toggle/delete and change observers
- task_views.py: pure derived views (filtered list, progress summary)
"""
