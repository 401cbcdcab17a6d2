"""
Application Layer for the workout diary.

This package contains:
- ports/: Abstract interfaces (storage slot, document store, digest, ids)
- services/: Account, Entry and Transfer services over the document
- errors: The error taxonomy raised by the services
"""
