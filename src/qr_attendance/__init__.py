"""QR Attendance package.

Feature modules (attendance, sessions, qr, reports, stats, users) sit behind a
thin Flask controller layer, with services built on repository protocols.
"""
