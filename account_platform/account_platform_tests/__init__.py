"""
account_service tests

Covers the account service backend:

- FastAPI application and routes (`main.py`, `routes/`)
- SQLAlchemy models and the user directory (`models.py`, `db.py`, `users.py`)
- Auth workflow, access guard, hashing and token signing (`workflow.py`, `guard.py`, `auth.py`)
- Verification mail helpers (`utils/mailer.py`)
"""
