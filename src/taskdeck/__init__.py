"""taskdeck: an in-memory task list with a console front-end."""
