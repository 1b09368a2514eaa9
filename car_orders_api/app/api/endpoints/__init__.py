"""
Route modules: ``cars`` for orders, ``catalog`` for inventory lookups.
"""
