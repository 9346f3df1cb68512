from .option import Option, Some, NONE, from_nullable, matching, or_else_throw
from .result import Result, Ok, Err, from_option as result_from_option, to_option as result_to_option
from .slot import Slot, AttributeSlot, get_or_insert
from .errors import Failure, SlotOccupied
from .logger import ConsoleLogger, use_logger, current_logger
