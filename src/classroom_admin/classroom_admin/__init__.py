"""Classroom administration package.

This package is organized by feature modules (students, classes, attendance,
dashboard, ...) with a thin Flask controller layer on top of an in-memory
data manager and its repositories.
"""
