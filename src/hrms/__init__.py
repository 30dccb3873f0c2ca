"""ModernTech HRMS package.

In-memory record store for employees, attendance, leave and payroll, organized
by feature modules (employees, attendance, payroll, ...) with a thin Flask
controller layer on top of the store and derivation services.
"""
