import logging

# Configuration
DATA_FILE = 'students.txt'
DELIMITER = ','
FIELD_COUNT = 5
DEFAULT_READ_LENGTH = 64
EXPORT_FOLDER = 'exports'

# Keep the console quiet unless something goes wrong
LOG_LEVEL = logging.WARNING
LOG_FORMAT = '%(levelname)s:%(name)s:%(message)s'
