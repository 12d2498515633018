"""
Task subsystem.

Components:
- task_models.py: task variants (ToDo, Deadline, Event) and their rendering
- task_list.py: ordered in-memory collection with 0-based positional access
- task_store.py: flat text-file store (one rendered task per line)
"""
