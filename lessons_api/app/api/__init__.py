"""
API package containing the HTTP routes.

``router`` bundles the routes served under ``/api``; the image route is
mounted on its own by ``main.create_app``.
"""
