import asyncio
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from lintstyle.core.languages import get_profile, resolve_language
from lintstyle.core.lines import split_lines
from lintstyle.core.ports.reader import SourceReader
from lintstyle.core.rules import Rule
from lintstyle.core.tokenizer import tokenize
from lintstyle.errors import TIMEOUT_RULE, FileReadError, RuleExecutionError
from lintstyle.models import RunResult, Severity, SourceFile, Violation

logger = logging.getLogger(__name__)


def run(source: SourceFile, rules: Sequence[Rule]) -> list[Violation]:
    """Run ``rules`` in order against one file and return violations sorted by position."""
    tokens = tuple(tokenize(source.text, get_profile(source.language)))
    lines = tuple(split_lines(source.text))

    violations: list[Violation] = []
    for rule in rules:
        try:
            violations.extend(rule.check(source, tokens, lines))
        except Exception as exc:
            logger.exception("Rule %s failed on %s", rule.id, source.path)
            violations.append(RuleExecutionError(rule.id, source.path, exc).to_violation())

    violations.sort(key=lambda v: v.sort_key)
    return violations


def lint_source(path: str, text: str, rules: Sequence[Rule], language: str | None = None) -> list[Violation]:
    resolved_language = resolve_language(language, Path(path))
    return run(SourceFile.from_text(path, text, resolved_language), rules)


def _lint_path(path: str, rules: Sequence[Rule], reader: SourceReader, language: str | None) -> list[Violation]:
    try:
        text = reader.read_text(path)
    except FileReadError as exc:
        logger.warning("Skipping %s: %s", path, exc.reason)
        return [exc.to_violation()]
    return lint_source(path, text, rules, language)


def _timeout_violation(path: str, timeout: float) -> Violation:
    return Violation(
        path=path,
        line=1,
        severity=Severity.ERROR,
        rule=TIMEOUT_RULE,
        message=f"Linting did not finish within {timeout:g}s.",
    )


async def lint_paths(
    paths: Sequence[str],
    rules: Sequence[Rule],
    reader: SourceReader,
    language: str | None = None,
    jobs: int | None = None,
    timeout: float | None = None,
) -> RunResult:
    """Lint files concurrently on worker threads.

    Files are independent, so they run in parallel up to ``jobs`` at a time
    (default: CPU count). Every file finishes before the result is built, and
    the result keeps the input order of ``paths``.

    A file that exceeds ``timeout`` is reported as a ``timeout`` violation, but
    its worker thread cannot be stopped: it keeps its ``jobs`` slot until it
    returns, and the call does not complete before it does.
    """
    unique_paths = list(dict.fromkeys(paths))
    semaphore = asyncio.Semaphore(jobs or os.cpu_count() or 1)

    async def _one(path: str) -> list[Violation]:
        async with semaphore:
            work = asyncio.ensure_future(asyncio.to_thread(_lint_path, path, rules, reader, language))
            if timeout is None:
                return await work
            try:
                return await asyncio.wait_for(asyncio.shield(work), timeout)
            except TimeoutError:
                logger.warning("Timed out linting %s after %ss", path, timeout)
                # Threads cannot be interrupted; hold the slot until this one returns.
                await asyncio.wait([work])
                if not work.cancelled() and work.exception() is not None:
                    logger.debug("Discarded failure from timed out %s: %r", path, work.exception())
                return [_timeout_violation(path, timeout)]

    results = await asyncio.gather(*(_one(path) for path in unique_paths))
    logger.debug("Linted %d file(s)", len(unique_paths))
    return RunResult(files=dict(zip(unique_paths, results, strict=True)))
