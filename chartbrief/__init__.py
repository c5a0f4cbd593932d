# Configure SSL verification before any HTTP clients are used.
from chartbrief.config import DISABLE_SSL_VERIFY

# Suppress InsecureRequestWarning when SSL verification is disabled
if DISABLE_SSL_VERIFY:
    import urllib3
    urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
