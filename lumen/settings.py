# settings.py
# Defaults loaded into app.config. Override with app.config.update(...).

HOST = "127.0.0.1"
PORT = 5050
DEBUG = False
LOG_LEVEL = "INFO"
