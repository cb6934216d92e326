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
    # Paths
    "TASKPAD_DATA_DIR": "Local data directory for the log file and database (default: .local/taskpad).",
    "TASKPAD_TASKS_DB_PATH": "SQLite task snapshot (default: <data_dir>/tasks.sqlite3).",
    # Persistence
    "TASKPAD_AUTOSAVE": "Save the task list after every change (true/false, default: true).",
}
