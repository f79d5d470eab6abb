"""Users app package.

Defines the custom user model (``AUTH_USER_MODEL = "users.User"``) and the
thin authentication endpoints that issue JWT pairs. Everything else in the
project only needs ``request.user.id`` from this app.
"""
