from typing import Iterable, List

from set_oplog.interpreter import OperationLogResult
from set_oplog.working_set import Member


def _render_member(member: Member) -> str:
    return repr(member)


def render_literal(members: Iterable[Member]) -> str:
    """
    Render *members* as a list literal, e.g. ``[1, 5]`` or ``[]``.
    """
    return "[" + render_joined(members) + "]"


def render_joined(members: Iterable[Member]) -> str:
    """
    Join *members* with ``", "`` and no trailing separator.
    """
    return ", ".join(_render_member(member) for member in members)


def render_size(result: OperationLogResult) -> str:
    return f"Size: {result.size}"


def render_type_tags(members: Iterable[Member]) -> List[str]:
    # diagnostic only
    return [type(member).__name__ for member in members]


def render_report(
    result: OperationLogResult, *, include_type_tags: bool = False
) -> List[str]:
    """
    The lines reported for *result*, in output order:
    the list literal, the optional type tags, the size and the joined members.
    """
    lines = [render_literal(result.members)]
    if include_type_tags:
        lines.extend(render_type_tags(result.members))
    lines.append(render_size(result))
    lines.append(render_joined(result.members))
    return lines
