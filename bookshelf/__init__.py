"""Genre Library - Core Application Package

This package contains the core domain modules:
- Book records and borrower state (book.py)
- Patron preferences and scoring (patron.py)
- Library registry and borrowing policy (library.py)
- Scenario file loading and replay (scenario.py)
"""
