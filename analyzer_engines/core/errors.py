class AnalyzerError(RuntimeError):
    """Base error."""

class ConfigError(AnalyzerError):
    """Raised when an analysis configuration has an unexpected shape."""

class GitError(AnalyzerError):
    """Raised when git fails to report ignored files."""
