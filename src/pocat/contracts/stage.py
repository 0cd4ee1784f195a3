"""Stage protocol definition."""

from typing import Generic, TypeVar, Protocol, runtime_checkable

TIn = TypeVar("TIn")
TOut = TypeVar("TOut")


@runtime_checkable
class Stage(Protocol, Generic[TIn, TOut]):
    """Protocol for pipeline stages.

    Stages are the building blocks of the merge pipeline. Each stage:
    - Has a unique name used for logging and timing
    - Implements a run method that transforms input to output
    - Never depends on another stage's internals, only on the catalog model
    """

    name: str
    """Unique identifier for this stage, e.g. "merge" or "format"."""

    def run(self, data: TIn) -> TOut:
        """Execute this stage with the given input data.

        Args:
            data: Input data matching the stage's expected input type

        Returns:
            Output data in the stage's declared output type

        Raises:
            ParseError: If a catalog text is malformed (parse stage only)
        """
        ...
