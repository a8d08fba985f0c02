"""
Business modules of the Shopping List backend.

- subscriptions: API-access key registry checked on every request
- auth: accounts, passwords, tokens, lockout, register/login/validate
- items: shopping list items scoped to their owner

Each module keeps its Protocol interfaces, Pydantic models, exceptions
and service implementation together. Modules that persist data also
ship an in-memory and a Supabase repository; modules that serve HTTP
ship a routes.py mounted by api.app. The API layer only talks to the
interfaces, wired up in api.dependencies.
"""
