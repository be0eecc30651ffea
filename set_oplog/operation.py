import logging
import re
from typing import Optional

from attr import attrib, attrs
from attr.validators import instance_of

from immutablecollections import immutableset

from set_oplog.working_set import NOT_A_NUMBER, Member

ADD = "a"
REMOVE = "r"
FLUSH = "f"

RECOGNIZED_COMMANDS = immutableset([ADD, REMOVE, FLUSH])

REJECT = "reject"
SENTINEL = "sentinel"
SKIP = "skip"

MALFORMED_PAYLOAD_POLICIES = immutableset([REJECT, SENTINEL, SKIP])

_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")


class MalformedOperationError(ValueError):
    """
    Raised when an add or remove line carries a payload which is not a decimal integer.
    """

    def __init__(self, record: "OperationRecord") -> None:
        super().__init__(
            f"Line {record.line_number}: cannot parse `{record.payload}` as a decimal "
            f"integer in operation `{record.line}`"
        )
        self.record = record


@attrs(frozen=True, slots=True)
class OperationRecord:
    """
    A single line of an operation log.

    The first character is the *command* code
    and everything after it is the *payload*.
    """

    command: str = attrib(validator=instance_of(str))
    payload: str = attrib(validator=instance_of(str))
    line_number: int = attrib(validator=instance_of(int), kw_only=True)

    @command.validator
    def _validate_command(self, _attr, command):
        if len(command) != 1:
            raise ValueError(f"A command code is a single character but got `{command}`")

    @property
    def line(self) -> str:
        return self.command + self.payload

    def is_recognized(self) -> bool:
        return self.command in RECOGNIZED_COMMANDS


def check_malformed_payload_policy(policy: str) -> None:
    if policy not in MALFORMED_PAYLOAD_POLICIES:
        raise RuntimeError(f"Unknown malformed payload policy {policy}")


def parse_operation_record(line: str, *, line_number: int) -> Optional[OperationRecord]:
    """
    Split *line* into its command code and payload.

    Returns `None` for an empty line, which carries no command at all.
    """
    if not line:
        return None
    return OperationRecord(line[0], line[1:], line_number=line_number)


def parse_payload(record: OperationRecord, *, policy: str = REJECT) -> Optional[Member]:
    """
    Interpret the payload of *record* as a decimal integer.

    If the payload is malformed, *policy* decides what happens:
    ``reject`` raises a `MalformedOperationError`,
    ``sentinel`` returns `NOT_A_NUMBER`,
    and ``skip`` returns `None` so the caller can ignore the line.

    Under ``sentinel`` surrounding whitespace is ignored
    and an empty or all-whitespace payload reads as 0.
    """
    check_malformed_payload_policy(policy)

    payload = record.payload
    if policy == SENTINEL:
        payload = payload.strip()
        if not payload:
            return 0

    if _DECIMAL_INTEGER.fullmatch(payload):
        return int(payload)

    if policy == REJECT:
        raise MalformedOperationError(record)
    elif policy == SENTINEL:
        return NOT_A_NUMBER
    else:
        logging.warning(
            "Skipping line %s with malformed payload: %s", record.line_number, record.line
        )
        return None
