"""Shared constants used across the application."""

# GitHub API Constants
# --------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API base URL (override for GitHub Enterprise Server)."""

RAW_CONTENT_MEDIA_TYPE = "application/vnd.github.v3.raw"
"""Accept header value asking the contents endpoint for raw file bytes instead of JSON."""

CONTENTS_PATH_TEMPLATE = "/repos/{owner}/{repo}/contents/{path}"
"""Path template of the repository contents endpoint."""

# Default File Settings
# ---------------------

DEFAULT_REMOTE_PATH = "CLAUDE.md"
"""Default path of the file in the source repository."""

DEFAULT_LOCAL_PATH = "CLAUDE.md"
"""Default local destination file."""

DEFAULT_EXPECTED_MARKER = "CLAUDE.md"
"""Substring the downloaded file is expected to contain."""

BACKUP_SUFFIX = ".backup."
"""Separator between the local path and the backup timestamp."""

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
"""Timestamp format of backup files (second granularity)."""

PARTIAL_DOWNLOAD_SUFFIX = ".partial"
"""Suffix of the sibling file the download is written to before it replaces the local file."""

# External Executables
# --------------------

DEFAULT_GH_EXECUTABLE = "gh"
DEFAULT_GIT_EXECUTABLE = "git"
DEFAULT_DIFF_EXECUTABLE = "diff"

INSTALL_HINTS: dict[str, list[str]] = {
    "gh": [
        "macOS: brew install gh",
        "Ubuntu: sudo apt install gh",
        "Other: https://cli.github.com/manual/installation",
    ],
    "git": ["Please install git first."],
}
"""Install hints shown when a required executable cannot be found, keyed by executable name."""

HELP_FLAGS = ("-h", "--help")
AFFIRMATIVE_ANSWERS = ("y", "yes")
