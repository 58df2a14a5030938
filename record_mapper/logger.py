import logging

logger = logging.getLogger("record_mapper")
