"""
Settings package for receipt_server.
The active module is selected with the ENVIRONMENT variable.
"""
from decouple import config

ENVIRONMENT = config('ENVIRONMENT', default='development')

if ENVIRONMENT == 'production':
    from .production import *
elif ENVIRONMENT == 'test':
    from .test import *
else:
    from .development import *
