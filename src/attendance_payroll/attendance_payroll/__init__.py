"""Attendance Payroll package.

This package is organized by feature modules (attendance, excuses, payroll,
advances, ...) with a thin Flask controller layer on top of pure calculation
rules and service/repository layers.
"""
