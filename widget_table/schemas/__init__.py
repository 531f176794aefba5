"""Pydantic schemas package.

Folder intent:
  common.py        — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  user.py          — User request DTOs and response model
  course.py        — Course request DTOs and response model
  widget_table.py  — Widget table view model (state, headers, rows, pager)
"""
