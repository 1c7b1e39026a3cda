# config.example.py

"""
Documentation-only module (safe to commit).

Configuration is read from environment variables, optionally via a local .env file
in the working directory. Real environment variables always win over .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "Name used in log lines (default: todo_cli).",
    "TODO_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TODO_LOG_DIR": "If set, also write a full DEBUG log to <dir>/todo_cli.log.",
    # Storage
    "TODO_DB_PATH": "Task list JSON file (default: todos.json in the working directory).",
}
