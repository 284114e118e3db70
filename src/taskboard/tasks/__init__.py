"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilters, Priority and filter enums)
- task_commands.py: store intents (AddTask, UpdateTask, ...)
- task_store.py: immutable snapshots, the apply() reducer and the TaskStore owner
- task_filters.py: pure visible-list derivation
- task_api.py: form-side helpers (trim/validate/build tasks, demo seed)
"""
