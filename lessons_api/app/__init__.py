"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, store adapter, error
responses), ``schemas`` (request models), ``services`` (store access
and business rules) and ``api`` (routers).
"""
