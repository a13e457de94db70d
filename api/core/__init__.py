"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks both features use (DB wiring, errors,
logging). Keep feature-specific SQL and business rules in the corresponding
feature package (`accounts/`, `messages/`).
"""
