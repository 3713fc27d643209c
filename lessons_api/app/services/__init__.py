"""
Service layer abstraction.

Each service encapsulates the store calls for a domain.  Services take
the ``LessonStore`` as an explicit argument so API handlers stay free
of persistence details.
"""
