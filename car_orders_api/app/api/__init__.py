"""
HTTP routes; ``router.router`` is mounted by ``create_app``.
"""
