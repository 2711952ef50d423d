"""
Models Package

Pydantic DTOs exchanged between the services, the REST gateways and the
presentation layer. None of them are persisted by the core.
"""
