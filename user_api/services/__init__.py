"""Services package — all business logic lives here, never in routers.

Files:
  user.py  — user read strategies and creation

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
