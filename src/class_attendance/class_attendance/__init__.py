"""Class Attendance package.

Organized by feature modules (users, classes, students, attendance, records,
site) with a thin Flask controller layer over service/repository layers.
"""
