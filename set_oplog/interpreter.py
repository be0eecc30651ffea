r"""
Applies an operation log to a `WorkingSet`.

An operation log is a text file with one `OperationRecord` per line.
Each line is applied in order:

- ``a<n>`` adds *n* to the working set,
- ``r<n>`` removes *n* from the working set,
- ``f`` is reserved for a future flush and changes nothing,
- lines starting with any other character are ignored.

After the whole log has been applied,
the distinct members are reported in ascending order as an `OperationLogResult`.
"""
import logging
from pathlib import Path
from typing import Iterable, Tuple

from attr import attrib, attrs
from attr.validators import instance_of

from immutablecollections.converter_utils import _to_tuple

from set_oplog.operation import (
    ADD,
    FLUSH,
    REJECT,
    REMOVE,
    check_malformed_payload_policy,
    parse_operation_record,
    parse_payload,
)
from set_oplog.working_set import Member, WorkingSet


@attrs(frozen=True, slots=True)
class OperationLogResult:
    """
    The sorted distinct members left after applying an operation log,
    together with counts of how the log's lines were handled.
    """

    members: Tuple[Member, ...] = attrib(converter=_to_tuple)
    num_records: int = attrib(validator=instance_of(int), kw_only=True, default=0)
    num_ignored: int = attrib(validator=instance_of(int), kw_only=True, default=0)
    num_skipped: int = attrib(validator=instance_of(int), kw_only=True, default=0)

    @property
    def size(self) -> int:
        return len(self.members)


def interpret_operations(
    lines: Iterable[str], *, malformed_payload: str = REJECT
) -> OperationLogResult:
    """
    Apply each of *lines* in order to an initially empty `WorkingSet`.

    Empty lines are skipped but still counted when numbering lines for error messages.
    See `parse_payload` for the meaning of *malformed_payload*.
    """
    check_malformed_payload_policy(malformed_payload)

    working_set = WorkingSet()
    num_records = 0
    num_ignored = 0
    num_skipped = 0

    for line_number, line in enumerate(lines, start=1):
        record = parse_operation_record(line, line_number=line_number)
        if record is None:
            continue
        num_records += 1

        if record.command == FLUSH:
            working_set.flush()
        elif record.command in (ADD, REMOVE):
            value = parse_payload(record, policy=malformed_payload)
            if value is None:
                num_skipped += 1
            elif record.command == ADD:
                working_set.add(value)
            else:
                working_set.remove(value)
        else:
            logging.debug(
                "Ignoring line %s with unrecognized command `%s`",
                line_number,
                record.command,
            )
            num_ignored += 1

    return OperationLogResult(
        working_set.sorted_members(),
        num_records=num_records,
        num_ignored=num_ignored,
        num_skipped=num_skipped,
    )


def read_operation_log(input_file_path: Path) -> Tuple[str, ...]:
    """
    Read all lines of the operation log at *input_file_path* into memory.

    Both CR LF and bare LF line endings are accepted;
    the line endings themselves are not part of the returned lines.
    """
    with input_file_path.open() as input_file:
        return tuple(line.rstrip("\n") for line in input_file)


def apply_operation_log(
    input_file_path: Path, *, malformed_payload: str = REJECT
) -> OperationLogResult:
    logging.info("Reading operation log: %s", str(input_file_path.absolute()))
    result = interpret_operations(
        read_operation_log(input_file_path), malformed_payload=malformed_payload
    )
    logging.info(
        "Applied %s operations (%s ignored, %s skipped); %s distinct members remain",
        result.num_records,
        result.num_ignored,
        result.num_skipped,
        result.size,
    )
    return result
