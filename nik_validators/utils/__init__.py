"""
Utils package
"""
from .logger import logger, setup_logger, get_logger, mask_number

__all__ = ['logger', 'setup_logger', 'get_logger', 'mask_number']
