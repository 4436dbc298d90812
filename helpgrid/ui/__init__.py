# helpgrid/ui/__init__.py
# Terminal presentation: typesetter, themes & Rich components
