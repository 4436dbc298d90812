# helpgrid/core/__init__.py
# Layout engine: data model, measurements & row layout policy
