"""
Hotel use-cases: room inventory, user accounts, login and the booking ledger.

Every public service method returns a ``ServiceResult``; nothing but
programming errors escapes a service.
"""
