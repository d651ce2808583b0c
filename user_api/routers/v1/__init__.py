"""v1 router package — all /api/v1/* endpoints live here.

Files:
  users.py  — /api/v1/user read strategies and create

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to user_api/services/.
"""
