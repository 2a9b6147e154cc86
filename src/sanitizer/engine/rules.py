"""
Parsing of rule pipelines into ordered steps.

Grammar (string form):
    "step1|step2:arg1,arg2|step3"

A pipeline may also be given as a sequence of step strings or Step objects.
"""

from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple, Union

WILDCARD = "*"
STEP_SEPARATOR = "|"
ARGUMENT_MARKER = ":"
ARGUMENT_SEPARATOR = ","


@dataclass(frozen=True)
class Step:
    """A transformer name and the string arguments declared after it."""

    name: str
    arguments: Tuple[str, ...] = ()

    def build_arguments(self, value: Any) -> List[Any]:
        """Positional arguments for invocation: the value first, then declared ones."""
        return [value, *self.arguments]


Pipeline = Union[str, Sequence[Union[str, Step]]]


def parse_step(token: str) -> Step:
    """
    Parse one step token.

    Only the first ``:`` separates the name from its arguments, so
    ``replace:a,b:c`` yields name ``replace`` with arguments ``("a", "b:c")``.
    """
    if ARGUMENT_MARKER not in token:
        return Step(token)

    name, raw_arguments = token.split(ARGUMENT_MARKER, 1)
    return Step(name, tuple(raw_arguments.split(ARGUMENT_SEPARATOR)))


def parse_pipeline(pipeline: Pipeline) -> List[Step]:
    """
    Normalize a pipeline into a list of steps, in declaration order.

    Args:
        pipeline: Piped string or sequence of step strings / Step objects

    Returns:
        Ordered list of Step
    """
    if isinstance(pipeline, str):
        tokens: Sequence[Union[str, Step]] = pipeline.split(STEP_SEPARATOR)
    else:
        tokens = pipeline

    return [token if isinstance(token, Step) else parse_step(str(token)) for token in tokens]
