"""Domain layer for the authentication service.

Business rules for accounts and credentials, decoupled from the GraphQL
presentation and from storage.
"""
