"""
Logging configuration for the grammar conversion tool.
"""
import sys
from pathlib import Path
from loguru import logger
from grammar2cnf.config import config


def setup_logging():
    """Setup logging configuration."""
    # Remove default handler
    logger.remove()
    
    # Get logging config
    log_level = config.get('logging.level', 'INFO')
    log_format = config.get('logging.format', 
                           "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} - {message}")
    log_file = config.get('logging.log_file')
    
    # Add console handler, stdout is reserved for command output
    logger.add(
        sys.stderr,
        format=log_format,
        level=log_level,
        colorize=True
    )
    
    # Add file handler
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=log_format,
            level=log_level,
            rotation=config.get('logging.rotation', '10 MB'),
            retention=config.get('logging.retention', '7 days'),
            compression="zip"
        )
    
    return logger


# Initialize logging
app_logger = setup_logging()
