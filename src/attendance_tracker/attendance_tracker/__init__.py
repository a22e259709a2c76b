"""Term attendance tracker package.

Organized by feature modules (terms, holidays, stats, interaction) over a
single in-memory state snapshot, with a thin Flask controller layer on top.
"""
