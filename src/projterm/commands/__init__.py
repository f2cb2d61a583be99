"""
projterm command catalogue and command-level helpers.

This package contains the command registry the parser dispatches on, along
with autocomplete suggestions, help rendering and requirement checks.
"""
