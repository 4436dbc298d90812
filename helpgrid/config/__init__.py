# helpgrid/config/__init__.py
# Layout defaults & persisted user settings
