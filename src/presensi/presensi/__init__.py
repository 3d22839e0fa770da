"""Presensi package.

Organized by feature modules (employees, activities, attendance) with a thin Flask
controller layer over service/repository layers, plus the ``wizard`` package that
drives the multi-step check-in form against an async gateway.
"""
