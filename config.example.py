# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKDECK_APP_NAME": "App display name (default: taskdeck).",
    "TASKDECK_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKDECK_LOG_DIR": "Directory for taskdeck.log (default: .local/taskdeck).",
    "TASKDECK_LOG_TO_FILE": "Write the full debug log to a file (true/false, default: true).",
    # Task list
    "TASKDECK_SEED_DEMO_TASKS": "Start with the three demo tasks (true/false, default: true).",
    "TASKDECK_STRICT_TITLES": "Reject blank titles with an error instead of ignoring them.",
    "TASKDECK_DEFAULT_FILTER": "Initial filter: all | active | completed (default: all).",
}
