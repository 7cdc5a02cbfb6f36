"""
Recipe feature: HTTP routes, business logic and SQL for the `recipes` table.
"""
