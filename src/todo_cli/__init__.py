"""Single-user command-line task tracker backed by a JSON file."""
