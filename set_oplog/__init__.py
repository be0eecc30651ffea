r"""
This module applies a log of set-mutation commands and reports what is left.

Terminology
===========
- an *operation record* is one line of an operation log:
    a single command character followed by a decimal integer payload.
- the *working set* is the set of distinct integers the log is applied to.
    It exists only while the log is being applied.
- the *result* is the members of the working set, sorted ascending,
    once every record has been applied.
"""
from set_oplog.interpreter import (  # noqa
    OperationLogResult,
    apply_operation_log,
    interpret_operations,
    read_operation_log,
)
from set_oplog.operation import MalformedOperationError, OperationRecord  # noqa
from set_oplog.version import version as __version__  # noqa
from set_oplog.working_set import NOT_A_NUMBER, WorkingSet  # noqa
