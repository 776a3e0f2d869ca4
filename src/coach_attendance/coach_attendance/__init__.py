"""Coach attendance package.

Organized by feature modules (teams, roster, sessions, attendance, reports)
with a thin Flask controller layer over service/repository layers.
"""
