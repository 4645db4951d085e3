import logging

parser_logger = logging.getLogger("setcookie.parser")
adapter_logger = logging.getLogger("setcookie.adapter")
