"""I/O helpers: Arrow schemas and output path conventions."""
