"""
Request and response bodies for the ``/api/cars`` routes.
"""
