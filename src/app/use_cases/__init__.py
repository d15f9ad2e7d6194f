"""
Use Cases

Organized into domain folders:
- auth/: Login and credential reset flows
- users/: Registration and profile management
- transactions/: Income and expense records
"""
