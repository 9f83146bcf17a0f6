"""Recipe catalog entries, one module per drink category.

Every module here exposes a ``RECIPES`` tuple; RecipeCatalog.discover_recipes()
collects them all.
"""
