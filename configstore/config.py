import os


class Config:
	"""
	configstore library settings.
	All settings can be overridden via environment variables.

	Environment Variables:
	----------------------
	CONFIGURATION_FROM: Provider directives consumed by Store.init_from_environment.
	CONFIGSTORE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
	CONFIGSTORE_JSON_LOGS: Render log lines as JSON when set to 1/true/yes. Default: false
	CONFIGSTORE_REFRESH_INTERVAL: Seconds between two stats of a refreshing file. Default: 10
	"""
	CONFIG_ENV_VAR = 'CONFIGURATION_FROM'

	LOG_LEVEL = os.getenv('CONFIGSTORE_LOG_LEVEL', 'INFO').upper()
	DEBUG = LOG_LEVEL == 'DEBUG'
	JSON_LOGS = os.getenv('CONFIGSTORE_JSON_LOGS', 'false').lower() in ('1', 'true', 'yes')

	REFRESH_INTERVAL = float(os.getenv('CONFIGSTORE_REFRESH_INTERVAL', '10'))

	# Item priorities assigned by the file tree loader
	HIGH_PRIORITY = 10
	LOW_PRIORITY = 5
