"""Message keys requested from the localizer."""

UPDATE_AVAILABLE = "update_available"
NEW_VERSION_MESSAGE = "new_version_message"
UPDATE_BUTTON = "update"
NEXT_TIME_BUTTON = "next_time"
SKIP_BUTTON = "skip_version"

UNKNOWN_VERSION = "Unknown"


def format_new_version(template: str, app_name: str, version: str) -> str:
    """Fill the app name and target version into a localized template."""
    return template.format(app_name=app_name, version=version or UNKNOWN_VERSION)
