# api/config.py
"""
Settings for the splitter backend, read from the environment (and from a
``.env`` file at the project root when one exists).

Variables:
  SPLITTER_DEBUG            : turn on Flask debug mode (default off)
  PORT                      : port for the local dev server (default 5000)
  CORS_ORIGINS              : comma-separated allowed origins (default "*")
  SPLITTER_MAX_PARTICIPANTS : largest group accepted (default 20)
  SPLITTER_CURRENCY_SYMBOL  : symbol used in share messages (default "₹")
  SPLITTER_APP_URL          : link appended to share messages (default none)
  SPLITTER_LOG_LEVEL        : logging level name (default "INFO")
"""
from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent

# Read .env file if it exists
env_file = BASE_DIR / '.env'
if env_file.exists():
    environ.Env.read_env(str(env_file))


class Config:
    def __init__(self, environ_vars=None):
        env = environ.Env(
            SPLITTER_DEBUG=(bool, False),
            PORT=(int, 5000),
            CORS_ORIGINS=(list, []),
            SPLITTER_MAX_PARTICIPANTS=(int, 20),
            SPLITTER_CURRENCY_SYMBOL=(str, '₹'),
            SPLITTER_APP_URL=(str, ''),
            SPLITTER_LOG_LEVEL=(str, 'INFO'),
        )
        if environ_vars is not None:
            env.ENVIRON = environ_vars

        self.DEBUG = env('SPLITTER_DEBUG')
        self.PORT = env('PORT')
        # plain "*" string when unset, so flask-cors answers with "*"
        origins = [o.strip() for o in env('CORS_ORIGINS') if o.strip()]
        self.CORS_ORIGINS = origins or '*'
        self.MAX_PARTICIPANTS = env('SPLITTER_MAX_PARTICIPANTS')
        self.CURRENCY_SYMBOL = env('SPLITTER_CURRENCY_SYMBOL')
        self.APP_URL = env('SPLITTER_APP_URL') or None
        self.LOG_LEVEL = env('SPLITTER_LOG_LEVEL').upper()


config = Config()
