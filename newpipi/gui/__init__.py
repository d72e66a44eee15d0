"""PyQt5 front end: the project-setup window and its background worker."""
