# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory for the store and taskpad.log (default: .local/taskpad).",
    "TASKPAD_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/todos.sqlite3).",
    # Store bootstrap
    "TASKPAD_SEED_ON_FIRST_RUN": "Insert sample tasks when the store is empty (true/false, default: true).",
    # Remote collection
    "TASKPAD_REMOTE_URL": (
        "JSON array of {title, completed} objects used by /import "
        "(default: https://jsonplaceholder.typicode.com/todos; empty disables import)."
    ),
    "TASKPAD_REMOTE_TIMEOUT_SECONDS": "Upper bound for one remote fetch (default: 10).",
    "TASKPAD_REMOTE_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout (default: 5).",
}
