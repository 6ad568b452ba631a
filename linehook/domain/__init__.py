"""Domain layer - core business logic and interfaces.

This layer contains:
- Webhook event entities
- Persistence record entities
- Message store interface
- Domain exceptions
"""
