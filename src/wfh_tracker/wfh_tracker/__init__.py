"""Work-location status tracker package.

Organized by feature modules (statuses, audit, roster, analytics, seeding)
with a thin Flask controller layer over service/repository layers.
"""
