from lintstyle.models import Severity, Violation

READ_ERROR_RULE = "read-error"
TIMEOUT_RULE = "timeout"


class LintStyleError(Exception):
    """Base class for lintstyle failures."""


class ConfigurationError(LintStyleError):
    """Invalid rule set configuration; aborts the run before any file is linted."""


class FileReadError(LintStyleError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason

    def to_violation(self) -> Violation:
        return Violation(
            path=self.path,
            line=1,
            severity=Severity.ERROR,
            rule=READ_ERROR_RULE,
            message=f"Could not read file: {self.reason}",
        )


class RuleExecutionError(LintStyleError):
    def __init__(self, rule_id: str, path: str, cause: BaseException) -> None:
        super().__init__(f"Rule '{rule_id}' failed on {path}: {cause!r}")
        self.rule_id = rule_id
        self.path = path
        self.cause = cause

    def to_violation(self) -> Violation:
        return Violation(
            path=self.path,
            line=1,
            severity=Severity.ERROR,
            rule=self.rule_id,
            message=f"Rule crashed: {type(self.cause).__name__}: {self.cause}",
        )
