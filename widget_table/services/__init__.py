"""Services package — all business logic lives here, never in routers.

Files:
  widget_table.py  — WidgetTableService: state decoding, sort whitelist, windowed fetch, view model
  widgets.py       — Widget definitions (columns, actions) for users and courses
  user.py          — User CRUD rules
  course.py        — Course CRUD rules

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
