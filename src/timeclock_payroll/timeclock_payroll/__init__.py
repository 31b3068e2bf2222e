"""Store attendance & payroll backend.

Organized by feature modules (employees, stores, attendance, payroll, admins)
with a thin Flask controller layer on top of service/repository layers.
Employees clock in and out at geofenced stores; admins run periodic payroll
from the closed clock sessions.
"""
