"""
Service layer abstraction.

Each service wraps the SQL for one domain so that API handlers never
touch the database connection directly.
"""
