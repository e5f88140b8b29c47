"""
Signals sent by the console client for the UI host to render.
"""
from django.dispatch import Signal

# Sent with level ('success' or 'error') and message
toast_shown = Signal()

# Sent with role (role name) and path (redirect target)
session_redirected = Signal()
