import os
import logging
from logging.handlers import TimedRotatingFileHandler

LOGGER_NAME = 'gitea-github-migrator'

def get_log_dir():
    """Get the directory where log files are written."""
    log_dir = os.getenv('LOG_DIR', os.path.join(os.getcwd(), 'logs'))
    os.makedirs(log_dir, exist_ok=True)
    return log_dir

def setup_logging(log_level='INFO', service_name='migrate'):
    """Set up logging configuration with log rotation
    
    Args:
        log_level (str): The logging level to use (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        service_name (str): Base name of the log file
        
    Returns:
        logging.Logger: The configured logger
    """
    log_dir = get_log_dir()
    
    # Get log retention period from environment variable (default to 30 days)
    retention_days = int(os.getenv('LOG_RETENTION_DAYS', '30'))
    
    # Convert string log level to logging constant
    numeric_level = getattr(logging, str(log_level).upper(), None)
    if not isinstance(numeric_level, int):
        print(f"Invalid log level: {log_level}, defaulting to INFO")
        numeric_level = logging.INFO
    
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            TimedRotatingFileHandler(
                os.path.join(log_dir, f'{service_name}.log'),
                when='midnight',
                interval=1,
                backupCount=retention_days,
                encoding='utf-8'
            ),
            logging.StreamHandler()
        ]
    )
    
    # Set requests and urllib3 logging to WARNING to reduce noise
    logging.getLogger('requests').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    
    return logging.getLogger(LOGGER_NAME)
