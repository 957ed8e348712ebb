from pathlib import Path


class AgentsBuildError(Exception):
    """Base user-facing build error."""


class BuildFileError(AgentsBuildError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingConfigFileError(BuildFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required config file")


class InvalidJsonFormatError(BuildFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(BuildFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class MissingRulesDirectoryError(BuildFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing rules directory")


class InvalidFrontmatterError(AgentsBuildError):
    def __init__(self, filename: str) -> None:
        self.filename = filename
        message = "Invalid frontmatter"
        super().__init__(f"{message}: {filename}" if filename else message)


class UnreadableRuleError(BuildFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Unreadable rule file ({detail})")
