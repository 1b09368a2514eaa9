"""
Inventory catalog and order lifecycle.

``catalog_service`` answers which cars can be ordered; ``order_service``
keeps the orders themselves.  Neither module knows about HTTP.
"""
