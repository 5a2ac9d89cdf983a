"""
Task subsystem.

Components:
- task_models.py: data structures (Task, RemoteTask, ImportResult, DeleteRequest)
- task_store.py: SQLite-backed storage, schema bootstrap and seeding
- search.py: pure title filter used for the visible list
- remote.py: HTTP source of the remote collection
- importer.py: duplicate-safe import from a remote source into the store
"""
