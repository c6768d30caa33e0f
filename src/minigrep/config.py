"""Run configuration built from positional arguments and an injected environment."""

import logging
from collections.abc import Mapping, Sequence
from typing import Self

from mm_result import Result
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .report import Reporter

logger = logging.getLogger(__name__)

IGNORE_CASE_ENV = "IGNORE_CASE"


class Config(BaseModel):
    """Validated, immutable settings for one search run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    query: str = Field(min_length=1)
    file_path: str = Field(min_length=1)
    ignore_case: bool = False

    @classmethod
    def build(cls, args: Sequence[str], *, env: Mapping[str, str]) -> Result[Self]:
        """Build config from a process argument list.

        Args:
            args: Full argument list; the first element is the program name and is skipped.
            env: Environment mapping; ``IGNORE_CASE=1`` enables case-insensitive search.

        """
        rest = iter(args[1:])
        query = next(rest, None)
        if query is None:
            return Result.err("missing_query", context={"message": "missing query argument"})
        file_path = next(rest, None)
        if file_path is None:
            return Result.err("missing_file_path", context={"message": "missing file path argument"})
        if next(rest, None) is not None:
            return Result.err("too_many_arguments", context={"message": "too many arguments"})

        ignore_case = env.get(IGNORE_CASE_ENV) == "1"
        try:
            config = cls(query=query, file_path=file_path, ignore_case=ignore_case)
        except ValidationError as e:
            errors = e.errors(include_url=False)
            message = "; ".join(f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in errors)
            return Result.err(("validation_error", e), context={"errors": errors, "message": message})

        logger.debug("config: query=%r file_path=%r ignore_case=%s", query, file_path, ignore_case)
        return Result.ok(config)

    @classmethod
    def build_or_exit(cls, args: Sequence[str], *, env: Mapping[str, str], reporter: Reporter) -> Self:
        """Build config. Print an argument error and exit(1) on failure."""
        result = cls.build(args, env=env)
        if result.is_ok():
            return result.unwrap()
        message = result.context["message"] if result.context else str(result.error)
        reporter.print_error_and_exit("argument error", str(result.error), message)
