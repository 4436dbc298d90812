# helpgrid/ui/core/__init__.py
# Rich primitives shared by the typesetter & CLI output
