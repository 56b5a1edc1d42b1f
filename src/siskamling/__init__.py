"""Siskamling attendance package.

Organized by feature modules (schedules, attendance, recap, storage) with a
thin Flask controller layer over service/repository layers.
"""
