"""v1 router package — all /api/v1/* endpoints live here.

Files:
  dashboard.py  — multiple widget tables on one page
  users.py      — user CRUD + per-user courses widget
  courses.py    — course CRUD

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to widget_table/services/.
"""
