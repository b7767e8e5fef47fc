"""
Domain Layer

Pure business objects with no external service dependencies.
Contains entities, value objects, ports (interfaces), and exceptions.
"""
