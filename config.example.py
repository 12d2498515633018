# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "Name used in the console greeting (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKPAD_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/taskpad.log (default: true).",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory (default: .local/taskpad).",
    "TASKPAD_TASKS_PATH": "Task store file, one task per line (default: <data_dir>/tasks.txt).",
}
