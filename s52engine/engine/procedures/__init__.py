"""Top-level CS procedures. Importing a module registers its procedure."""
