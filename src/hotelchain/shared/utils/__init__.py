from .logger import get_logger as get_logger
from .validators import to_decimal as to_decimal
