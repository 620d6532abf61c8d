from dotenv import load_dotenv
import os

load_dotenv()
LOG_LEVEL = os.getenv('LINKRISK_LOG_LEVEL', 'INFO').upper()

# Web adapter
WEB_HOST = os.getenv('LINKRISK_HOST', '127.0.0.1')
WEB_PORT = int(os.getenv('LINKRISK_PORT', '5000'))
RATE_LIMIT = int(os.getenv('LINKRISK_RATE_LIMIT', '30'))        # requests per window per client
RATE_WINDOW = float(os.getenv('LINKRISK_RATE_WINDOW', '60'))   # seconds

# Reject non-http(s) input in the CLI / web layer before it reaches the engine
STRICT_INPUT = os.getenv('LINKRISK_STRICT_INPUT', '0').strip().lower() in ('1', 'true', 'yes', 'on')

# Batch scoring: candidate column names holding the URL
URL_COLUMNS = ('url', 'link', 'location')
