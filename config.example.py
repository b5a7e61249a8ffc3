# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Task data itself is never configured or stored: every run starts with an empty list.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name shown in the header (default: taskboard).",
    "TASKBOARD_LOG_LEVEL": "File logging level (default: INFO).",
    "TASKBOARD_LOG_DIR": "Directory for taskboard.log (default: .local/taskboard).",
    "TASKBOARD_LOG_TO_FILE": "Write a log file at all (true/false, default: true).",
    # Initial view
    "TASKBOARD_DARK_MODE": "Start in dark theme (true/false, default: false).",
    "TASKBOARD_DEFAULT_FILTER": "Initial filter: all | active | completed (default: all).",
}
