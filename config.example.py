# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name used in logs (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKLIST_LOG_TO_FILE": "Write full debug logs to <data_dir>/tasklist.log (default: true).",
    # Paths
    "TASKLIST_DATA_DIR": "Local data directory for logs (default: .local/tasklist).",
    "TASKLIST_TASKS_PATH": "JSON task file (default: tasklist.json in the working directory).",
    # Behaviour
    "TASKLIST_TIMEZONE": "IANA timezone used to decide what 'today' is (default: UTC).",
    "TASKLIST_COLOR": "Color swatches in the table (default: on unless NO_COLOR is set).",
    "TASKLIST_AUTOSAVE": "Save after every add/edit/delete, not only at exit (default: false).",
}
